#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#
import logging

from .EntityForm import EntityForm

LOGGER = logging.getLogger(__name__)


class VmForm(EntityForm):
    def __init__(self, harvester_driver, action):
        super(VmForm, self).__init__(harvester_driver, 'Virtual Machine', action)

    def set_cpu(self, cpu):
        self.set_input('CPU', cpu)

    def set_memory(self, memory):
        self.set_input('Memory', memory)

    def get_cpu(self):
        return self.get_input('CPU')

    def get_memory(self):
        return self.get_input('Memory')

    def set_root_image(self, image_name):
        LOGGER.debug(f'Boot from image {image_name}')
        self.open_tab('Volumes')
        self.select_option('Image', image_name)
        self.open_tab('Basics')

#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#
import logging

from hst_utils import constants
from hst_utils.utils import size_label
from .EntityForm import EntityForm
from .EntityListView import EntityListView, EntityNotFoundError

LOGGER = logging.getLogger(__name__)


class VolumeForm(EntityForm):
    def __init__(self, harvester_driver, action):
        super(VolumeForm, self).__init__(harvester_driver, 'Volume', action)

    def set_size(self, size):
        self.set_input('Size', size)

    def use_image(self, image_name):
        self.select_option('Source', 'VM Image')
        self.select_option('Image', image_name)


class VolumePage(EntityListView):
    def __init__(self, harvester_driver, base_url):
        super(VolumePage, self).__init__(
            harvester_driver,
            base_url,
            'volume',
            'Volumes',
            constants.VOLUME_RESOURCE,
        )
        self.edit_form = None
        self.edited_volume = None

    def go_to_list(self):
        self.load()

    def create(self, volume):
        LOGGER.debug(f'Create volume {volume.name}')
        self.load()
        self.click_create()

        form = VolumeForm(self.harvester_driver, 'Create')
        form.wait_for_displayed()
        form.set_namespace(volume.namespace)
        form.set_name(volume.name)
        if volume.image:
            form.use_image(volume.image)
        form.set_size(volume.size)
        form.create()

        self.wait_for_displayed(wait_long=True)
        self.wait_for_entity(volume.name)

    def check_state(self, volume, states=(constants.VOLUME_STATE_READY,)):
        self.load()
        self.wait_for_state(volume.name, list(states), volume.namespace)
        self.wait_for_size(volume.name, volume.size, volume.namespace)

    def wait_for_size(self, volume_name, size, namespace=None):
        expected = size_label(size)
        self.harvester_driver.wait_long_until(
            f'Volume {volume_name} size is not {expected}',
            lambda: self.get_row_cell(volume_name, 'Size', namespace) == expected,
        )

    def delete(self, namespace, volume_name):
        LOGGER.debug(f'Delete volume {namespace}/{volume_name}')
        self.load()
        self.remove(volume_name, namespace).confirm()
        self.wait_for_entity_removed(volume_name)

    def get_root_volume_name(self, vm_name):
        prefix = vm_name + constants.ROOT_DISK_INFIX
        names = [name for name in self.get_entities() if name.startswith(prefix)]
        if not names:
            raise EntityNotFoundError(f'No root volume of vm {vm_name} found')
        return names[0]

    def _has_root_volume(self, vm_name):
        try:
            self.get_root_volume_name(vm_name)
            return True
        except EntityNotFoundError:
            return False

    def check_state_by_vm(self, vm_name, states=(constants.VOLUME_STATE_READY,)):
        """The root volume of vm_name is listed even though the VM is gone."""
        self.load()
        self.harvester_driver.wait_long_until(
            f'Root volume of vm {vm_name} is not listed',
            self._has_root_volume,
            vm_name,
        )
        volume_name = self.get_root_volume_name(vm_name)
        self.wait_for_state(volume_name, list(states))
        return volume_name

    def delete_volume_by_vm(self, vm_name):
        self.load()
        volume_name = self.get_root_volume_name(vm_name)
        LOGGER.debug(f'Delete root volume {volume_name} of vm {vm_name}')
        self.remove(volume_name).confirm()
        self.wait_for_entity_removed(volume_name)

    def go_to_edit(self, volume_name, namespace=None):
        self.click_action(volume_name, 'Edit Config', namespace)

        self.edit_form = VolumeForm(self.harvester_driver, 'Edit')
        self.edit_form.wait_for_displayed()
        self.edited_volume = volume_name
        return self.edit_form

    def go_to_edit_by_vm_name(self, vm_name):
        self.load()
        return self.go_to_edit(self.get_root_volume_name(vm_name))

    def increase_size(self, size, namespace):
        if self.edit_form is None:
            raise RuntimeError('No volume edit form is open, call go_to_edit first')
        LOGGER.debug(f'Resize volume {namespace}/{self.edited_volume} to {size_label(size)}')
        self.edit_form.set_size(size)
        self.edit_form.save()

        volume_name = self.edited_volume
        self.edit_form = None
        self.edited_volume = None

        self.load()
        self.wait_for_size(volume_name, size, namespace)

    def edit(self, volume):
        self.load()
        self.go_to_edit(volume.name, volume.namespace)
        self.increase_size(volume.size, volume.namespace)

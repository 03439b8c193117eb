#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#
import logging

from hst_utils import constants
from .EntityForm import EntityForm
from .EntityListView import EntityListView
from .ModalDialog import ModalDialog
from .VolumePage import VolumePage

LOGGER = logging.getLogger(__name__)


class ImageForm(EntityForm):
    def __init__(self, harvester_driver, action):
        super(ImageForm, self).__init__(harvester_driver, 'Image', action)

    def set_url(self, url):
        self.select_radio('URL')
        self.set_input('URL', url)


class ImagePage(EntityListView):
    def __init__(self, harvester_driver, base_url):
        super(ImagePage, self).__init__(
            harvester_driver,
            base_url,
            'image',
            'Images',
            constants.IMAGE_RESOURCE,
        )

    def go_to_list(self):
        self.load()

    def create(self, image):
        if not image.url:
            raise ValueError(f'Image {image.name} has no URL to download it from')
        LOGGER.debug(f'Create image {image.name} from {image.url}')
        self.load()
        self.click_create()

        form = ImageForm(self.harvester_driver, 'Create')
        form.wait_for_displayed()
        form.set_namespace(image.namespace)
        form.set_name(image.name)
        form.set_url(image.url)
        form.create()

        self.wait_for_displayed(wait_long=True)
        self.wait_for_entity(image.name)

    def ensure(self, image):
        self.load()
        if self.has_entity(image.name):
            LOGGER.debug(f'Image {image.name} already exists')
        else:
            self.create(image)
        self.wait_for_state(image.name, constants.IMAGE_STATE_ACTIVE)

    def export_image(self, vm_name, image_name, namespace=constants.DEFAULT_NAMESPACE):
        """Export the root volume of vm_name as a new image."""
        volumes = VolumePage(self.harvester_driver, self.base_url)
        volumes.load()
        volume_name = volumes.get_root_volume_name(vm_name)
        LOGGER.debug(f'Export volume {volume_name} of vm {vm_name} to image {image_name}')
        volumes.click_action(volume_name, 'Export Image')

        dialog = ModalDialog(self.harvester_driver, 'Export Image')
        dialog.wait_for_displayed()
        dialog.select_option('Namespace', namespace)
        dialog.set_input('Name', image_name)
        dialog.submit('Create')
        volumes.raise_if_error_notification()

    def check_state(self, image):
        self.load()
        self.wait_for_state(image.name, constants.IMAGE_STATE_ACTIVE, image.namespace)
        if image.size is not None:
            self.harvester_driver.wait_long_until(
                f'Image {image.name} size is not {image.size}',
                lambda: self.get_row_cell(image.name, 'Size', image.namespace) == image.size,
            )

    def delete(self, image_name, namespace=None):
        LOGGER.debug(f'Delete image {image_name}')
        self.load()
        self.remove(image_name, namespace).confirm()
        self.wait_for_entity_removed(image_name)

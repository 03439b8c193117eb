#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#
import logging

from selenium.webdriver.common.by import By

from hst_utils import constants
from .Displayable import Displayable
from .EntityListView import EntityListView
from .ImagePage import ImagePage
from .ModalDialog import ModalDialog
from .VmDetailView import VmDetailView
from .VmForm import VmForm

LOGGER = logging.getLogger(__name__)


class VmsPage(EntityListView):
    def __init__(self, harvester_driver, base_url):
        super(VmsPage, self).__init__(
            harvester_driver,
            base_url,
            'vm',
            'Virtual Machines',
            constants.VM_RESOURCE,
        )

    def init(self, image):
        """Make sure the image VMs boot from is downloaded and Active."""
        ImagePage(self.harvester_driver, self.base_url).ensure(image)

    def go_to_list(self):
        self.load()

    def create(self, vm):
        LOGGER.debug(f'Create vm {vm.namespace}/{vm.name}')
        self.load()
        self.click_create()

        form = VmForm(self.harvester_driver, 'Create')
        form.wait_for_displayed()
        form.set_namespace(vm.namespace)
        form.set_name(vm.name)
        form.set_cpu(vm.cpu)
        form.set_memory(vm.memory)
        form.set_root_image(vm.image)
        form.create()

        self.wait_for_displayed(wait_long=True)
        self.wait_for_entity(vm.name)

    def go_to_config_detail(self, vm_name, namespace=None):
        self.load()
        self.click_action(vm_name, 'Edit Config', namespace)

        form = VmForm(self.harvester_driver, 'Edit')
        form.wait_for_displayed()
        self.harvester_driver.wait_until(
            f'Edit config form does not show vm {vm_name}',
            lambda: form.get_name() == vm_name,
        )
        return form

    def go_to_yaml_detail(self, vm_name, namespace=None):
        self.load()
        self.click_action(vm_name, 'Edit YAML', namespace)

        yaml_view = YamlEditorView(self.harvester_driver)
        yaml_view.wait_for_displayed()
        return yaml_view

    def go_to_detail(self, vm_name, namespace):
        self.harvester_driver.get(self.detail_url(namespace, vm_name))

        vm_detail_view = VmDetailView(self.harvester_driver, vm_name)
        vm_detail_view.wait_for_displayed()
        return vm_detail_view

    def delete(self, namespace, vm_name, remove_root_disk=True):
        LOGGER.debug(f'Delete vm {namespace}/{vm_name}, remove root disk: {remove_root_disk}')
        self.load()
        remove_dialog = self.remove(vm_name, namespace)
        if not remove_root_disk:
            remove_dialog.uncheck_all()
        remove_dialog.confirm()
        self.wait_for_entity_removed(vm_name)

    def plug_volume(self, vm_name, volume_names, namespace):
        for volume_name in volume_names:
            LOGGER.debug(f'Hot-plug volume {volume_name} to vm {namespace}/{vm_name}')
            self.load()
            self.click_action(vm_name, 'Add Volume', namespace)

            dialog = AddVolumeDialog(self.harvester_driver)
            dialog.wait_for_displayed()
            dialog.set_name(volume_name)
            dialog.select_volume(volume_name)
            dialog.apply()

        volumes_tab = self.go_to_detail(vm_name, namespace).open_volumes_tab()
        self.harvester_driver.wait_long_until(
            f'Volumes {volume_names} are not attached to vm {vm_name}',
            volumes_tab.has_volumes,
            volume_names,
        )

    def unplug_volume(self, vm_name, volume_names, namespace):
        """Detach volume_names from the running VM.

        Returns the VM states read from the detail page after each detach and
        on every poll until the volumes are gone. A restart shows up there as
        one of constants.VM_RESTART_STATES.
        """
        vm_detail_view = self.go_to_detail(vm_name, namespace)
        volumes_tab = vm_detail_view.open_volumes_tab()
        seen_states = []
        for volume_name in volume_names:
            LOGGER.debug(f'Hot-unplug volume {volume_name} from vm {namespace}/{vm_name}')
            volumes_tab.detach(volume_name)
            seen_states.append(vm_detail_view.get_state())

        def volumes_detached():
            seen_states.append(vm_detail_view.get_state())
            return volumes_tab.has_none_of_volumes(volume_names)

        self.harvester_driver.wait_long_until(
            f'Volumes {volume_names} are still attached to vm {vm_name}',
            volumes_detached,
        )
        LOGGER.debug(f'States of vm {vm_name} while unplugging: {seen_states}')
        return seen_states


class AddVolumeDialog(ModalDialog):
    def __init__(self, harvester_driver):
        super(AddVolumeDialog, self).__init__(harvester_driver, 'Add Volume')

    def set_name(self, disk_name):
        self.set_input('Name', disk_name)

    def select_volume(self, volume_name):
        self.select_option('Volume', volume_name)

    def apply(self):
        self.submit('Apply')


class YamlEditorView(Displayable):
    def is_displayed(self):
        return self.harvester_driver.is_css_selector_displayed('.yaml-editor .CodeMirror')

    def get_displayable_name(self):
        return 'YAML editor'

    def get_text(self):
        return self.harvester_driver.retry_if_known_issue(
            lambda: self.harvester_driver.find_element(By.CSS_SELECTOR, '.yaml-editor .CodeMirror-code').text
        )

    def cancel(self):
        self.harvester_driver.button_wait_and_click('Cancel')
        self.wait_for_not_displayed()

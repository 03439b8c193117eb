#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#
import logging

from selenium.webdriver.common.by import By

from .Displayable import Displayable
from .ModalDialog import ModalDialog
from .WithMasthead import WithMasthead

LOGGER = logging.getLogger(__name__)

VOLUMES_TAB_XPATH = '//div[@id="volumes"]'
VOLUME_ROW_XPATH = VOLUMES_TAB_XPATH + '//tbody/tr[contains(@class, "main-row")]'
MASTHEAD_STATE_XPATH = '//header//span[contains(@class, "badge-state")]'


class VmDetailView(Displayable, WithMasthead):
    def __init__(self, harvester_driver, vm_name):
        super(VmDetailView, self).__init__(harvester_driver)
        self.vm_name = vm_name

    def is_displayed(self):
        return self.vm_name in self.get_title().split()

    def get_displayable_name(self):
        return 'VM detail view'

    def get_state(self):
        return self.harvester_driver.retry_if_known_issue(self._get_state)

    def _get_state(self):
        badges = self.harvester_driver.find_elements(By.XPATH, MASTHEAD_STATE_XPATH)
        return badges[0].text.strip() if badges else ''

    def open_volumes_tab(self):
        LOGGER.debug('Open volumes tab')
        self.harvester_driver.xpath_wait_and_click(
            'Volumes tab',
            '//li[contains(@class, "tab")]/a[normalize-space(.)="Volumes"]',
        )

        vm_volumes_tab = VmVolumesTab(self.harvester_driver)
        vm_volumes_tab.wait_for_displayed()
        return vm_volumes_tab


class VmVolumesTab(Displayable):
    def is_displayed(self):
        return self.harvester_driver.is_xpath_displayed(VOLUMES_TAB_XPATH)

    def get_displayable_name(self):
        return 'VM detail view, volumes tab'

    def get_volume_names(self):
        return self.harvester_driver.retry_if_known_issue(self._get_volume_names)

    def _get_volume_names(self):
        cells = self.harvester_driver.find_elements(By.XPATH, VOLUME_ROW_XPATH + '/td[@data-title="Name"]')
        return [cell.text.strip() for cell in cells]

    def has_volumes(self, volume_names):
        return set(volume_names) <= set(self.get_volume_names())

    def has_none_of_volumes(self, volume_names):
        return not set(volume_names) & set(self.get_volume_names())

    def detach(self, volume_name):
        LOGGER.debug(f'Detach volume {volume_name}')
        self.harvester_driver.xpath_wait_and_click(
            f'Detach button of {volume_name}',
            f'{VOLUME_ROW_XPATH}[td[@data-title="Name"][normalize-space(.)="{volume_name}"]]'
            '//button[normalize-space(.)="Detach Volume"]',
        )
        dialog = ModalDialog(self.harvester_driver, 'Detach Volume')
        dialog.wait_for_displayed()
        dialog.submit('Detach')

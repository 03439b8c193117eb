#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#
import logging

from selenium.webdriver.common.by import By
from .Displayable import Displayable

LOGGER = logging.getLogger(__name__)

DIALOG_XPATH = '//div[contains(@class, "prompt-remove")]'
CHECKBOX_XPATH = DIALOG_XPATH + '//label[contains(@class, "checkbox-container")]'


class RemoveDialog(Displayable):
    """The confirmation prompt shown before deleting resources.

    Deleting a VM lists one checkbox per attached volume, checked volumes
    are deleted together with the VM.
    """

    def is_displayed(self):
        return self.harvester_driver.is_xpath_displayed(DIALOG_XPATH)

    def get_displayable_name(self):
        return 'Remove dialog'

    def get_checkbox_labels(self):
        return self.harvester_driver.retry_if_known_issue(self._get_checkbox_labels)

    def _get_checkbox_labels(self):
        elements = self.harvester_driver.find_elements(By.XPATH, CHECKBOX_XPATH)
        return [' '.join(element.text.split()) for element in elements]

    def _checkbox_xpath(self, label):
        return f'{CHECKBOX_XPATH}[normalize-space(.)="{label}"]//span[contains(@class, "checkbox-custom")]'

    def is_checked(self, label):
        return self.harvester_driver.retry_if_known_issue(
            lambda: self.harvester_driver.find_element(By.XPATH, self._checkbox_xpath(label)).get_attribute(
                'aria-checked'
            )
            == 'true'
        )

    def set_checkbox(self, label, checked):
        if self.is_checked(label) != checked:
            LOGGER.debug(f'{"Check" if checked else "Uncheck"} {label} in {self.get_displayable_name()}')
            self.harvester_driver.xpath_click(self._checkbox_xpath(label))

    def uncheck_all(self):
        for label in self.get_checkbox_labels():
            self.set_checkbox(label, False)

    def confirm(self):
        LOGGER.debug(f'Confirm {self.get_displayable_name()}')
        self.harvester_driver.xpath_wait_and_click(
            'Delete button',
            DIALOG_XPATH + '//button[contains(@class, "bg-error")]',
        )
        self.wait_for_not_displayed()

    def cancel(self):
        self.harvester_driver.xpath_wait_and_click(
            'Cancel button',
            DIALOG_XPATH + '//button[normalize-space(.)="Cancel"]',
        )
        self.wait_for_not_displayed()

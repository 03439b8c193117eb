#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#
import logging

from selenium.webdriver.common.by import By

from .Displayable import Displayable
from .EntityForm import ERROR_BANNER_XPATH
from .WithNotifications import HarvesterUIError

LOGGER = logging.getLogger(__name__)

MODAL_XPATH = '//div[contains(@class, "vm--modal")]'


class ModalDialog(Displayable):
    def __init__(self, harvester_driver, title):
        super(ModalDialog, self).__init__(harvester_driver)
        self.title = title

    def is_displayed(self):
        title_xpath = f'{MODAL_XPATH}//*[contains(@class, "card-title")][normalize-space(.)="{self.title}"]'
        return self.harvester_driver.is_xpath_displayed(title_xpath) and not self.is_loading('.vm--modal')

    def get_displayable_name(self):
        return f'{self.title} dialog'

    def set_input(self, label, value):
        LOGGER.debug(f'Set {label} to {value} in {self.get_displayable_name()}')
        self.harvester_driver.xpath_type(
            f'{MODAL_XPATH}//div[contains(@class, "labeled-input")][label[normalize-space(.)="{label}"]]//input',
            value,
        )

    def select_option(self, label, option):
        LOGGER.debug(f'Select {option} as {label} in {self.get_displayable_name()}')
        self.harvester_driver.xpath_wait_and_click(
            f'Select {label}',
            f'{MODAL_XPATH}//div[contains(@class, "labeled-select")][.//label[normalize-space(.)="{label}"]]',
        )
        self.harvester_driver.xpath_wait_and_click(
            f'Option {option}',
            f'//ul[contains(@class, "vs__dropdown-menu")]/li[normalize-space(.)="{option}"]',
        )

    def click_button(self, text):
        LOGGER.debug(f'Click {text} on {self.get_displayable_name()}')
        self.harvester_driver.xpath_wait_and_click(
            f'Button {text}',
            f'{MODAL_XPATH}//button[normalize-space(.)="{text}"]',
        )

    def submit(self, text):
        self.click_button(text)
        self.harvester_driver.wait_long_until(
            f'{self.get_displayable_name()} is still displayed after {text}',
            self._is_closed_or_failed,
        )
        errors = self._get_errors()
        if errors:
            raise HarvesterUIError(f'{self.get_displayable_name()} failed: {"; ".join(errors)}')

    def cancel(self):
        self.click_button('Cancel')
        self.wait_for_not_displayed()

    def _get_errors(self):
        banners = self.harvester_driver.find_elements(By.XPATH, MODAL_XPATH + ERROR_BANNER_XPATH)
        return [' '.join(banner.text.split()) for banner in banners if banner.text.strip()]

    def _is_closed_or_failed(self):
        return not self.is_displayed() or bool(self._get_errors())

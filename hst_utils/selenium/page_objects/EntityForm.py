#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#
import logging

from selenium.webdriver.common.by import By

from .Displayable import Displayable
from .WithMasthead import WithMasthead
from .WithNotifications import HarvesterUIError

LOGGER = logging.getLogger(__name__)

FOOTER_XPATH = '//div[contains(@class, "cru-resource-footer")]'
ERROR_BANNER_XPATH = '//div[contains(@class, "banner") and contains(@class, "error")]'
NAMESPACE_XPATH = '//*[@data-testid="name-ns-description-namespace"]'
NAME_XPATH = '//*[@data-testid="name-ns-description-name"]//input'
SELECT_OPTION_XPATH = '//ul[contains(@class, "vs__dropdown-menu")]/li'


def labeled_input_xpath(label):
    return f'//div[contains(@class, "labeled-input")][label[normalize-space(.)="{label}"]]//input'


def labeled_select_xpath(label):
    return f'//div[contains(@class, "labeled-select")][.//label[normalize-space(.)="{label}"]]'


class EntityForm(Displayable, WithMasthead):
    """Create and edit pages of the dashboard (the cru-resource form)."""

    def __init__(self, harvester_driver, entity_type, action):
        super(EntityForm, self).__init__(harvester_driver)
        self.entity_type = entity_type
        self.action = action

    def is_displayed(self):
        title = self.get_title()
        footer_displayed = self.harvester_driver.is_xpath_displayed(FOOTER_XPATH)
        return self.action in title and self.entity_type in title and footer_displayed

    def get_displayable_name(self):
        return f'{self.action} {self.entity_type} form'

    def open_tab(self, tab_name):
        LOGGER.debug(f'Open tab {tab_name} of {self.get_displayable_name()}')
        self.harvester_driver.xpath_wait_and_click(
            f'Tab {tab_name}',
            f'//li[contains(@class, "tab")]/a[normalize-space(.)="{tab_name}"]',
        )

    def set_namespace(self, namespace):
        self._select(NAMESPACE_XPATH, namespace)

    def set_name(self, name):
        self.harvester_driver.xpath_type(NAME_XPATH, name)

    def get_name(self):
        return self.harvester_driver.retry_if_known_issue(
            lambda: self.harvester_driver.find_element(By.XPATH, NAME_XPATH).get_attribute('value')
        )

    def set_input(self, label, value):
        LOGGER.debug(f'Set {label} to {value}')
        self.harvester_driver.xpath_type(labeled_input_xpath(label), value)

    def get_input(self, label):
        return self.harvester_driver.retry_if_known_issue(
            lambda: self.harvester_driver.find_element(By.XPATH, labeled_input_xpath(label)).get_attribute('value')
        )

    def select_option(self, label, option):
        LOGGER.debug(f'Select {option} as {label}')
        self._select(labeled_select_xpath(label), option)

    def select_radio(self, option):
        self.harvester_driver.xpath_wait_and_click(
            f'Radio {option}',
            f'//div[contains(@class, "radio-group")]//label[normalize-space(.)="{option}"]',
        )

    def _select(self, select_xpath, option):
        self.harvester_driver.xpath_wait_and_click(f'Select {select_xpath}', select_xpath)
        search_xpath = select_xpath + '//input[contains(@class, "vs__search")]'
        if self.harvester_driver.is_xpath_present(search_xpath):
            # long option lists are filtered, the wanted one may be scrolled out
            self.harvester_driver.find_element(By.XPATH, search_xpath).send_keys(option)
        self.harvester_driver.xpath_wait_and_click(
            f'Option {option}',
            f'{SELECT_OPTION_XPATH}[normalize-space(.)="{option}"]',
        )

    def get_errors(self):
        return self.harvester_driver.retry_if_known_issue(self._get_errors)

    def _get_errors(self):
        banners = self.harvester_driver.find_elements(By.XPATH, ERROR_BANNER_XPATH)
        return [' '.join(banner.text.split()) for banner in banners if banner.text.strip()]

    def create(self):
        self._submit('Create')

    def save(self):
        self._submit('Save')

    def cancel(self):
        LOGGER.debug(f'Click Cancel on {self.get_displayable_name()}')
        self.harvester_driver.button_wait_and_click('Cancel')
        self.wait_for_not_displayed()

    def _submit(self, button_text):
        LOGGER.debug(f'Click {button_text} on {self.get_displayable_name()}')
        self.harvester_driver.xpath_wait_and_click(
            f'Button {button_text}',
            f'{FOOTER_XPATH}//button[normalize-space(.)="{button_text}"]',
        )
        self.harvester_driver.wait_long_until(
            f'{self.get_displayable_name()} is still displayed after {button_text}',
            self._is_closed_or_failed,
        )
        errors = self.get_errors()
        if errors:
            raise HarvesterUIError(f'{self.get_displayable_name()} failed: {"; ".join(errors)}')

    def _is_closed_or_failed(self):
        return not self.is_displayed() or bool(self._get_errors())

#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#
import logging

from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.common.by import By

from hst_utils.constants import HARVESTER_PRODUCT_ROUTE
from .Displayable import Displayable
from .RemoveDialog import RemoveDialog
from .WithMasthead import WithMasthead
from .WithNotifications import WithNotifications

LOGGER = logging.getLogger(__name__)

TABLE_XPATH = '//table[contains(@class, "sortable-table")]'
ROW_XPATH = TABLE_XPATH + '/tbody/tr[contains(@class, "main-row")]'
NAME_LINK_XPATH = './/td[contains(@class, "col-link-detail")]//a'
STATE_XPATH = './/span[contains(@class, "badge-state")]'
ACTION_MENU_ITEM_XPATH = '//ul[contains(@class, "list-unstyled") and contains(@class, "menu")]/li'


class EntityNotFoundError(Exception):
    pass


class EntityListView(Displayable, WithMasthead, WithNotifications):
    def __init__(self, harvester_driver, base_url, entity_type, title, resource):
        super(EntityListView, self).__init__(harvester_driver)
        self.base_url = base_url.rstrip('/')
        self.entity_type = entity_type
        self.title = title
        self.url = f'{self.base_url}{HARVESTER_PRODUCT_ROUTE}/{resource}'

    def is_displayed(self):
        title_present = self.get_title() == self.title
        table_present = self.harvester_driver.is_xpath_present(TABLE_XPATH)
        return title_present and table_present and not self.is_loading('table.sortable-table')

    def get_displayable_name(self):
        return self.entity_type.capitalize() + ' list view'

    def load(self):
        LOGGER.debug(f'Open {self.get_displayable_name()}')
        self.harvester_driver.get(self.url)
        self.wait_for_displayed()

    def detail_url(self, namespace, name):
        return f'{self.url}/{namespace}/{name}'

    def click_create(self):
        LOGGER.debug(f'Click Create on {self.get_displayable_name()}')
        self.close_notification_safely()
        self.harvester_driver.xpath_wait_and_click('Create button', '//*[@data-testid="masthead-create"]')

    def filter(self, text):
        self.harvester_driver.xpath_type('//input[contains(@class, "search")]', text)

    def get_entities(self):
        return self.harvester_driver.retry_if_known_issue(self._get_entity_names)

    def has_entity(self, entity_name):
        return entity_name in self.get_entities()

    def wait_for_entity(self, entity_name):
        self.harvester_driver.wait_long_until(
            f'{self.entity_type} {entity_name} is not listed',
            self.has_entity,
            entity_name,
        )

    def wait_for_entity_removed(self, entity_name):
        self.harvester_driver.wait_long_while(
            f'{self.entity_type} {entity_name} is still listed',
            self.has_entity,
            entity_name,
        )

    def get_state(self, entity_name, namespace=None):
        try:
            return self.harvester_driver.retry_if_known_issue(self._get_state, entity_name, namespace)
        except NoSuchElementException:
            raise self._not_found(entity_name, namespace)

    def wait_for_state(self, entity_name, states, namespace=None):
        if isinstance(states, str):
            states = [states]
        LOGGER.debug(f'Wait for {self.entity_type} {entity_name} to be in one of {states}')
        self.harvester_driver.wait_long_until(
            f'{self.entity_type} {entity_name} did not reach any of the states {states}',
            self._is_in_states,
            entity_name,
            states,
            namespace,
        )

    def _is_in_states(self, entity_name, states, namespace):
        try:
            return self.get_state(entity_name, namespace) in states
        except EntityNotFoundError:
            return False

    def get_row_cell(self, entity_name, column, namespace=None):
        index = self.get_column_index(column)
        try:
            return self.harvester_driver.retry_if_known_issue(self._get_row_cell, entity_name, index, namespace)
        except NoSuchElementException:
            raise self._not_found(entity_name, namespace)

    def get_column_index(self, column):
        headers = self.harvester_driver.retry_if_known_issue(self._get_column_headers)
        if column not in headers:
            raise ValueError(f'No column {column} in {self.get_displayable_name()}, found {headers}')
        # xpath positions are 1-based
        return headers.index(column) + 1

    def select_entity(self, entity_name, namespace=None):
        LOGGER.debug(f'Select {self.entity_type} {entity_name}')
        self._get_row(entity_name, namespace)
        # clicking the name cell would navigate to the entity detail
        self.harvester_driver.xpath_click(
            self._row_xpath(entity_name, namespace) + '/td[1]//span[contains(@class, "checkbox-custom")]'
        )

    def open_detail_view(self, entity_name, namespace=None):
        LOGGER.debug(f'Open detail of {self.entity_type} {entity_name}')
        self._get_row(entity_name, namespace)
        self.harvester_driver.xpath_click(self._row_xpath(entity_name, namespace) + NAME_LINK_XPATH[1:])

    def click_action(self, entity_name, action, namespace=None):
        LOGGER.debug(f'Click {action} on {self.entity_type} {entity_name}')
        self.close_notification_safely()
        self._get_row(entity_name, namespace)
        self.harvester_driver.xpath_wait_and_click(
            f'Action menu of {entity_name}',
            self._row_xpath(entity_name, namespace) + '//button[contains(@class, "role-multi-action")]',
        )
        self.harvester_driver.xpath_wait_and_click(
            f'Action {action}',
            f'{ACTION_MENU_ITEM_XPATH}[normalize-space(.)="{action}"]',
        )

    def remove_selected(self):
        LOGGER.debug(f'Delete selected {self.entity_type} entities')
        self.harvester_driver.xpath_wait_and_click('Delete button', '//button[@id="promptRemove"]')

        remove_dialog = RemoveDialog(self.harvester_driver)
        remove_dialog.wait_for_displayed()
        return remove_dialog

    def remove(self, entity_name, namespace=None):
        self.select_entity(entity_name, namespace)
        return self.remove_selected()

    def _row_xpath(self, entity_name, namespace=None):
        row_xpath = f'{ROW_XPATH}[{NAME_LINK_XPATH}[normalize-space(.)="{entity_name}"]]'
        if namespace is not None:
            row_xpath += f'[td[normalize-space(.)="{namespace}"]]'
        return row_xpath

    def _get_row(self, entity_name, namespace=None):
        try:
            return self.harvester_driver.find_element(By.XPATH, self._row_xpath(entity_name, namespace))
        except NoSuchElementException:
            raise self._not_found(entity_name, namespace)

    def _not_found(self, entity_name, namespace):
        in_namespace = f' in namespace {namespace}' if namespace is not None else ''
        return EntityNotFoundError(f'No {self.entity_type} with the name {entity_name}{in_namespace} found')

    def _get_state(self, entity_name, namespace):
        row = self.harvester_driver.find_element(By.XPATH, self._row_xpath(entity_name, namespace))
        return row.find_element(By.XPATH, STATE_XPATH).text.strip()

    def _get_row_cell(self, entity_name, index, namespace):
        row = self.harvester_driver.find_element(By.XPATH, self._row_xpath(entity_name, namespace))
        return ' '.join(row.find_element(By.XPATH, f'./td[{index}]').text.split())

    def _get_entity_names(self):
        elements = self.harvester_driver.find_elements(By.XPATH, ROW_XPATH + NAME_LINK_XPATH[1:])
        return [element.text.strip() for element in elements]

    def _get_column_headers(self):
        elements = self.harvester_driver.find_elements(By.XPATH, TABLE_XPATH + '/thead/tr/th')
        return [' '.join(element.text.split()) for element in elements]

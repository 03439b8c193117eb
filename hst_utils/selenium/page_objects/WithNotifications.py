#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#
import logging

from selenium.webdriver.common.by import By

from .WithHarvesterDriver import WithHarvesterDriver

LOGGER = logging.getLogger(__name__)

GROWL_XPATH = '//div[contains(@class, "growl-container")]//div[contains(@class, "growl")]'
ERROR_GROWL_XPATH = '//div[contains(@class, "growl-container")]//div[contains(@class, "growl") and contains(@class, "bg-error")]'
GROWL_CLOSE_XPATH = GROWL_XPATH + '//i[contains(@class, "close")]'


class HarvesterUIError(Exception):
    pass


class WithNotifications(WithHarvesterDriver):
    def is_error_notification_visible(self):
        return self.harvester_driver.is_xpath_displayed(ERROR_GROWL_XPATH)

    def get_error_notification(self):
        return self.harvester_driver.retry_if_known_issue(self._get_error_notification)

    def _get_error_notification(self):
        growls = self.harvester_driver.find_elements(By.XPATH, ERROR_GROWL_XPATH)
        return '\n'.join(' '.join(growl.text.split()) for growl in growls)

    def raise_if_error_notification(self):
        if self.is_error_notification_visible():
            message = self.get_error_notification()
            LOGGER.error(f'Error notification displayed: {message}')
            raise HarvesterUIError(message)

    def _is_notification_displayed(self):
        return self.harvester_driver.is_xpath_displayed(GROWL_CLOSE_XPATH)

    def close_notification_safely(self):
        # growls cover the row action buttons in the top right corner
        if self._is_notification_displayed():
            LOGGER.debug('Notification is present')
            try:
                self.harvester_driver.xpath_click(GROWL_CLOSE_XPATH)
                self.harvester_driver.wait_while(
                    'Notification is not closed',
                    self.harvester_driver.is_xpath_displayed,
                    GROWL_CLOSE_XPATH,
                )
                LOGGER.debug('Notification was closed')
            except Exception:
                LOGGER.debug('Notification closing failed', exc_info=1)

#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#
#
import logging

from selenium.common.exceptions import (
    NoSuchElementException,
    StaleElementReferenceException,
    TimeoutException,
    WebDriverException,
)
from selenium.webdriver.common.by import By
from selenium.webdriver.common.keys import Keys
from selenium.webdriver.support.ui import WebDriverWait

from hst_utils import assert_utils

LOGGER = logging.getLogger(__name__)


class Driver:
    def __init__(self, driver):

        # this is a selenium webdriver instance, keeping it private so
        # that we can wrap and control it better (e.g. retry after some exceptions)
        self.__driver = driver

    def get(self, url):
        LOGGER.debug(f'Navigate to {url}')
        self.__driver.get(url)

    def quit(self):
        self.__driver.quit()

    def set_window_size(self, width, height):
        self.__driver.set_window_size(width, height)

    def get_capability(self, capability_name):
        return self.__driver.capabilities[capability_name]

    def find_element(self, by, value):
        return self.__driver.find_element(by, value)

    def find_elements(self, by, value):
        return self.__driver.find_elements(by, value)

    def save_screenshot(self, path):
        self.__driver.save_screenshot(path)

    def save_page_source(self, path):
        with open(path, "w", encoding='utf-8') as text_file:
            text_file.write(self.__driver.page_source)

    def save_log(self, path, log_type):
        with open(path, "w", encoding='utf-8') as text_file:
            logs = self.__driver.get_log(log_type)
            if logs:
                for entry in logs:
                    text_file.write(f'{entry}\n\n')
            else:
                text_file.write('No log entries found')

    def save_console_log(self, path):
        self.save_log(path, 'browser')

    def save_performance_log(self, path):
        self.save_log(path, 'performance')

    def is_xpath_present(self, xpath):
        try:
            self.retry_if_stale(self.find_element, By.XPATH, xpath)
            return True
        except NoSuchElementException:
            return False

    def is_xpath_displayed(self, xpath):
        return self.retry_if_stale(
            lambda: self.is_xpath_present(xpath) and self.find_element(By.XPATH, xpath).is_displayed()
        )

    def is_css_selector_present(self, selector):
        try:
            self.retry_if_stale(self.find_element, By.CSS_SELECTOR, selector)
            return True
        except NoSuchElementException:
            return False

    def is_css_selector_displayed(self, selector):
        return self.retry_if_stale(
            lambda: self.is_css_selector_present(selector)
            and self.find_element(By.CSS_SELECTOR, selector).is_displayed()
        )

    def is_xpath_enabled(self, xpath):
        return self.retry_if_stale(lambda: self.find_element(By.XPATH, xpath).is_enabled())

    @staticmethod
    def button_xpath(text):
        # dashboard buttons wrap their label in spans and pad it with spaces
        return f'//button[normalize-space(.)="{text}"]'

    def xpath_click(self, xpath):
        return self.retry_if_stale(lambda: self.find_element(By.XPATH, xpath).click())

    def button_wait_and_click(self, text):
        return self.xpath_wait_and_click(f'Button {text}', self.button_xpath(text))

    def xpath_wait_and_click(self, message, xpath, wait_long=False):
        wait_until = self.wait_until
        if wait_long:
            wait_until = self.wait_long_until

        wait_until(f'{message} is not displayed', self.is_xpath_displayed, xpath)
        wait_until(f'{message} is not enabled', self.is_xpath_enabled, xpath)
        self.xpath_click(xpath)

    def xpath_type(self, xpath, text):
        """Replace the value of the input at xpath with text.

        Vue bound inputs ignore WebElement.clear(), so the current value is
        selected and typed over instead.
        """
        self.wait_until(f'Input {xpath} is not displayed', self.is_xpath_displayed, xpath)

        def type_text():
            element = self.find_element(By.XPATH, xpath)
            element.send_keys(Keys.CONTROL + 'a')
            element.send_keys(str(text))

        self.retry_if_stale(type_text)

    def wait_until(self, message, condition_method, *args):
        self._wait_until(message, assert_utils.SHORT_TIMEOUT, condition_method, *args)

    def wait_long_until(self, message, condition_method, *args):
        self._wait_until(message, assert_utils.LONG_TIMEOUT, condition_method, *args)

    def _wait_until(self, message, timeout, condition_method, *args):
        WebDriverWait(self.__driver, timeout, ignored_exceptions=[TimeoutException]).until(
            ConditionClass(condition_method, *args), message
        )

    def wait_while(self, message, condition_method, *args):
        self._wait_while(message, assert_utils.SHORT_TIMEOUT, condition_method, *args)

    def wait_long_while(self, message, condition_method, *args):
        self._wait_while(message, assert_utils.LONG_TIMEOUT, condition_method, *args)

    def _wait_while(self, message, timeout, condition_method, *args):
        WebDriverWait(self.__driver, timeout, ignored_exceptions=[TimeoutException]).until_not(
            ConditionClass(condition_method, *args), message
        )

    def retry_if_stale(self, method_to_retry, *args):
        condition = StaleExceptionOccurredCondition(method_to_retry, *args)
        WebDriverWait(self.__driver, assert_utils.LONG_TIMEOUT).until_not(
            condition, 'StaleElementReferenceException occurred'
        )
        if condition.error is not None:
            raise condition.error
        return condition.result

    # the dashboard tables re-render on every websocket update, reading
    # them is subject to the same stale element issue
    retry_if_known_issue = retry_if_stale


class ConditionClass:
    def __init__(self, condition_method, *args):
        self.condition_method = condition_method
        self.args = args
        self.retry = 0

    def __call__(self, __driver):
        self.retry += 1

        try:
            return self.condition_method(*self.args)
        # Stating it here to avoid logging it
        except NoSuchElementException as e:
            raise e
        except Exception as e:
            LOGGER.exception(f'!!! ConditionClass failed with {e.__class__.__name__} at retry number {self.retry}')
            raise e


class StaleExceptionOccurredCondition:
    def __init__(self, method_to_execute, *args):
        self.method_to_execute = method_to_execute
        self.args = args
        self.result = None
        self.error = None
        self.retry = 0

    def __call__(self, driver):
        should_run_again = False
        self.error = None
        try:
            self.retry += 1
            self.result = self.method_to_execute(*self.args)
        # ignore StaleElementReferenceException and try again
        except StaleElementReferenceException:
            should_run_again = True
        # ignore TimeoutException if caused by timeout in the grid's java code
        except TimeoutException as e:
            LOGGER.exception(self._failure_message(e))
            if 'java.util.concurrent.TimeoutException' in str(e):
                should_run_again = True
            else:
                self.error = e
        # expected condition, not logged
        except NoSuchElementException as e:
            self.error = e
        # ignore WebDriverException if caused by a truncated grid response:
        # Expected to read a START_MAP but instead have: END.
        except WebDriverException as e:
            LOGGER.exception(self._failure_message(e))
            if 'START_MAP' in str(e):
                should_run_again = True
            else:
                self.error = e
        except Exception as e:
            LOGGER.exception(self._failure_message(e))
            self.error = e
        return should_run_again

    def _failure_message(self, e):
        return f'!!! StaleExceptionOccurredCondition failed with {e.__class__.__name__} at retry number {self.retry}'

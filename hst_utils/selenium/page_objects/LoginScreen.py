#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#
import logging

from selenium.webdriver.common.by import By
from .Displayable import Displayable

LOGGER = logging.getLogger(__name__)

USERNAME_XPATH = '//*[@data-testid="local-login-username"]//input | //input[@data-testid="local-login-username"]'
PASSWORD_XPATH = '//*[@data-testid="local-login-password"]//input | //input[@data-testid="local-login-password"]'
SUBMIT_XPATH = '//button[@data-testid="login-submit"]'


class LoginScreen(Displayable):
    def __init__(self, harvester_driver, dashboard_url):
        super(LoginScreen, self).__init__(harvester_driver)
        self.dashboard_url = dashboard_url

    def is_displayed(self):
        return self.harvester_driver.is_xpath_displayed(PASSWORD_XPATH)

    def get_displayable_name(self):
        return 'Login screen'

    def load(self):
        self.harvester_driver.get(self.dashboard_url)

    def set_user_name(self, user_name):
        if self.harvester_driver.is_xpath_present(USERNAME_XPATH):
            self.harvester_driver.xpath_type(USERNAME_XPATH, user_name)

    def set_user_password(self, user_password):
        self.harvester_driver.find_element(By.XPATH, PASSWORD_XPATH).send_keys(user_password)

    def login(self):
        LOGGER.debug('Log in')
        self.harvester_driver.xpath_wait_and_click('Login button', SUBMIT_XPATH)
        self.harvester_driver.wait_until('Dashboard is not displayed after login', self.is_logged_in)

    def is_logged_in(self):
        return not self.is_displayed() and self.harvester_driver.is_xpath_displayed('//header')

    def login_if_needed(self, user_name, user_password):
        """Log in unless the session cookie is still valid.

        Each scenario starts with this, the browser is shared by the whole
        module and only the first scenario really has to log in.
        """
        self.load()
        self.harvester_driver.wait_until(
            'Neither the login screen nor the dashboard is displayed',
            lambda: self.is_displayed() or self.is_logged_in(),
        )
        if self.is_logged_in():
            LOGGER.debug('Already logged in')
            return
        self.set_user_name(user_name)
        self.set_user_password(user_password)
        self.login()

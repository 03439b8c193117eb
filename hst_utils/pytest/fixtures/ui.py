#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#
#

import logging

import pytest

from selenium import webdriver

from hst_utils.selenium.navigation.driver import Driver
from hst_utils.selenium.page_objects.LoginScreen import LoginScreen

LOGGER = logging.getLogger(__name__)

DRIVER_CREATE_RETRIES = 5


def create_webdriver(browser_name, options, grid_url=None):
    if grid_url:
        return webdriver.Remote(command_executor=grid_url, options=options)
    if browser_name == 'firefox':
        return webdriver.Firefox(options=options)
    return webdriver.Chrome(options=options)


@pytest.fixture(scope="module")
def harvester_driver(
    harvester_dashboard_url,
    selenium_browser_name,
    selenium_browser_options,
    selenium_grid_url,
    selenium_screen_width,
    selenium_screen_height,
):
    driver = None
    exception = None
    for i in range(DRIVER_CREATE_RETRIES):
        try:
            driver = create_webdriver(selenium_browser_name, selenium_browser_options, selenium_grid_url)
            break
        except Exception as e:
            LOGGER.exception(f'Failed to create driver {i}')
            exception = e
    else:
        LOGGER.error(f'Failed to create the selenium webdriver after {DRIVER_CREATE_RETRIES} retries')
        raise exception

    harvester_driver = Driver(driver)
    harvester_driver.set_window_size(selenium_screen_width, selenium_screen_height)
    harvester_driver.get(harvester_dashboard_url)

    try:
        yield harvester_driver
    finally:
        harvester_driver.quit()


@pytest.fixture(scope="module")
def save_screenshot(harvester_driver, selenium_artifact_full_path):
    def save(description):
        harvester_driver.save_screenshot(selenium_artifact_full_path(description, 'png'))

    return save


@pytest.fixture(scope="module")
def save_page_source(harvester_driver, selenium_artifact_full_path):
    def save(description):
        harvester_driver.save_page_source(selenium_artifact_full_path(description, 'html'))

    return save


@pytest.fixture(scope="module")
def save_logs_from_browser(harvester_driver, selenium_artifact_full_path):
    def save(description):
        # only chromium exposes the console and performance logs
        if harvester_driver.get_capability('browserName') == 'chrome':
            harvester_driver.save_console_log(selenium_artifact_full_path(description, 'txt'))
            harvester_driver.save_performance_log(selenium_artifact_full_path(description, 'perf.txt'))

    return save


def save_test_artifacts(test_name, failed, save_screenshot, save_page_source, save_logs_from_browser):
    status = "failed" if failed else "success"
    file_name = f'{test_name}_{status}'
    save_screenshot(file_name)
    if failed:
        save_logs_from_browser(file_name)
        save_page_source(file_name)


@pytest.fixture(scope="function", autouse=True)
def after_test(request, save_screenshot, save_page_source, save_logs_from_browser):
    failed_before = request.session.testsfailed
    yield
    failed = request.session.testsfailed > failed_before
    save_test_artifacts(request.node.originalname, failed, save_screenshot, save_page_source, save_logs_from_browser)


@pytest.fixture(scope="module")
def user_login(harvester_driver, harvester_dashboard_url):
    def login(username, password):
        login_screen = LoginScreen(harvester_driver, harvester_dashboard_url)
        login_screen.login_if_needed(username, password)

    return login


@pytest.fixture(scope="function", autouse=True)
def harvester_login(user_login, harvester_username, harvester_password):
    user_login(harvester_username, harvester_password)

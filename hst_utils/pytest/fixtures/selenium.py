#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#
#

import logging
import os
import time

from datetime import datetime

import pytest
import requests

from hst_utils.selenium import grid
from hst_utils.selenium.grid import browser

LOGGER = logging.getLogger(__name__)

GRID_STARTUP_WAIT_RETRIES = 300


class SeleniumGridError(Exception):
    pass


def _timestamp():
    return datetime.now().strftime("%Y%m%d_%H%M%S_%f")


def _node_ready(status_dict, browser_name):
    nodes = status_dict["value"].get("nodes", [])
    for node in nodes:
        for slot in node["slots"]:
            if slot["stereotype"]["browserName"] == browser_name and node["availability"] == "UP":
                return True
    return False


def grid_health_check(hub_url, browser_name, retries=GRID_STARTUP_WAIT_RETRIES, interval=0.1):
    status_url = hub_url.rstrip('/') + "/status"

    for _ in range(retries):
        try:
            response = requests.get(status_url, timeout=10)
            response.raise_for_status()
            status_dict = response.json()
            if status_dict["value"]["ready"] and _node_ready(status_dict, browser_name):
                return True
        except (requests.RequestException, ValueError, KeyError):
            LOGGER.debug(f'Selenium grid at {status_url} is not ready yet', exc_info=True)
        time.sleep(interval)

    raise SeleniumGridError(f"Selenium grid at {hub_url} didn't start up properly")


def _browser_params():
    requested = os.environ.get('HST_BROWSER')
    names = [requested] if requested else browser.SUPPORTED_BROWSERS
    return [pytest.param(name, id=name) for name in names]


@pytest.fixture(scope="session", params=_browser_params())
def selenium_browser_name(request):
    return request.param


@pytest.fixture(scope="session")
def selenium_browser_options(selenium_browser_name):
    return browser.options_for(selenium_browser_name)


@pytest.fixture(scope="session")
def selenium_screen_width():
    return grid.SCREEN_WIDTH


@pytest.fixture(scope="session")
def selenium_screen_height():
    return grid.SCREEN_HEIGHT


@pytest.fixture(scope="session")
def selenium_grid_url(selenium_browser_name):
    # without a hub the browser runs on the local machine
    hub_url = os.environ.get("HST_SELENIUM_HUB_URL")
    if hub_url:
        grid_health_check(hub_url, selenium_browser_name)
    return hub_url


@pytest.fixture(scope="module", autouse=True)
def selenium_disable_noisy_logging():
    selenium_logger = logging.getLogger('selenium')
    selenium_logger_level = selenium_logger.getEffectiveLevel()
    selenium_logger.setLevel(logging.WARNING)

    urllib3_logger = logging.getLogger('urllib3')
    urllib3_logger_level = urllib3_logger.getEffectiveLevel()
    urllib3_logger.setLevel(logging.WARNING)

    yield

    selenium_logger.setLevel(selenium_logger_level)
    urllib3_logger.setLevel(urllib3_logger_level)


@pytest.fixture(scope="session")
def selenium_artifacts_dir(artifacts_dir):
    path = os.path.join(artifacts_dir, 'ui_tests_artifacts/')
    os.makedirs(path, exist_ok=True)
    return path


@pytest.fixture(scope="session")
def selenium_artifact_filename(selenium_browser_name):
    def _selenium_artifact_filename(description, extension):
        return f"{_timestamp()}_{selenium_browser_name}_{description}.{extension}"

    return _selenium_artifact_filename


@pytest.fixture(scope="session")
def selenium_artifact_full_path(selenium_artifacts_dir, selenium_artifact_filename):
    def _selenium_artifact_full_path(description, extension):
        return os.path.join(
            selenium_artifacts_dir,
            selenium_artifact_filename(description, extension),
        )

    return _selenium_artifact_full_path

#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#

from unittest import mock

import pytest

from hst_utils.selenium.navigation.driver import Driver

BASE_URL = 'https://harvester.example.com'


@pytest.fixture
def base_url():
    return BASE_URL


@pytest.fixture
def driver():
    harvester_driver = mock.MagicMock(spec=Driver)
    harvester_driver.retry_if_known_issue.side_effect = lambda method, *args: method(*args)
    harvester_driver.retry_if_stale.side_effect = lambda method, *args: method(*args)
    harvester_driver.find_elements.return_value = []
    harvester_driver.is_xpath_displayed.return_value = False
    harvester_driver.is_xpath_present.return_value = False
    return harvester_driver

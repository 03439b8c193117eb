#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#
#

import pytest

from hst_utils.selenium.page_objects.ImagePage import ImagePage
from hst_utils.selenium.page_objects.VmsPage import VmsPage
from hst_utils.selenium.page_objects.VolumePage import VolumePage


@pytest.fixture(scope="module")
def vms_page(harvester_driver, harvester_url):
    return VmsPage(harvester_driver, harvester_url)


@pytest.fixture(scope="module")
def image_page(harvester_driver, harvester_url):
    return ImagePage(harvester_driver, harvester_url)


@pytest.fixture(scope="module")
def volume_page(harvester_driver, harvester_url):
    return VolumePage(harvester_driver, harvester_url)


@pytest.fixture
def boot_image(harvester_login, vms_page, harvester_image):
    vms_page.init(harvester_image)
    return harvester_image

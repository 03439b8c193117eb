#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#
#

import os

import pytest

from hst_utils import constants
from hst_utils.entities import ImageSpec


@pytest.fixture(scope='session')
def root_dir():
    return os.environ.get('HST_REPO_ROOT', os.getcwd())


@pytest.fixture(scope='session')
def harvester_url():
    url = os.environ.get('HST_HARVESTER_URL')
    if not url:
        pytest.skip('HST_HARVESTER_URL is not set')
    return url.rstrip('/')


@pytest.fixture(scope='session')
def harvester_dashboard_url(harvester_url):
    return f'{harvester_url}/dashboard/'


@pytest.fixture(scope='session')
def harvester_username():
    return os.environ.get('HST_HARVESTER_USERNAME', 'admin')


@pytest.fixture(scope='session')
def harvester_password():
    password = os.environ.get('HST_HARVESTER_PASSWORD')
    if password is None:
        pytest.fail('HST_HARVESTER_PASSWORD is not set')
    return password


@pytest.fixture(scope='session')
def harvester_namespace():
    return os.environ.get('HST_NAMESPACE', constants.DEFAULT_NAMESPACE)


@pytest.fixture(scope='session')
def harvester_image(harvester_namespace):
    return ImageSpec(
        name=os.environ.get('HST_IMAGE_NAME', constants.DEFAULT_IMAGE_NAME),
        url=os.environ.get('HST_IMAGE_URL', constants.DEFAULT_IMAGE_URL),
        namespace=harvester_namespace,
    )

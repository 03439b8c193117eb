# -*- coding: utf-8 -*-
#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#

from hst_utils.pytest import pytest_collection_modifyitems

from hst_utils.pytest.fixtures.artifacts import artifacts_dir

from hst_utils.pytest.fixtures.env import harvester_dashboard_url
from hst_utils.pytest.fixtures.env import harvester_image
from hst_utils.pytest.fixtures.env import harvester_namespace
from hst_utils.pytest.fixtures.env import harvester_password
from hst_utils.pytest.fixtures.env import harvester_url
from hst_utils.pytest.fixtures.env import harvester_username
from hst_utils.pytest.fixtures.env import root_dir

from hst_utils.pytest.fixtures.pages import *

from hst_utils.pytest.fixtures.selenium import *

from hst_utils.pytest.fixtures.ui import *

from hst_utils.pytest.running_time import *

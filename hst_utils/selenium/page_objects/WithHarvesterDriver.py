#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#
from hst_utils.selenium.navigation.driver import Driver


class WithHarvesterDriver:
    def __init__(self, harvester_driver: Driver):
        super(WithHarvesterDriver, self).__init__()
        self.harvester_driver = harvester_driver

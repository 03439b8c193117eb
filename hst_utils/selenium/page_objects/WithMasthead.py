#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#
from selenium.webdriver.common.by import By
from .WithHarvesterDriver import WithHarvesterDriver

MASTHEAD_TITLE_XPATH = '//header//div[contains(@class, "title")]//h1'


class WithMasthead(WithHarvesterDriver):
    def get_title(self):
        return self.harvester_driver.retry_if_known_issue(self._get_title)

    def _get_title(self):
        titles = self.harvester_driver.find_elements(By.XPATH, MASTHEAD_TITLE_XPATH)
        if not titles:
            return ''
        return ' '.join(titles[0].text.split())

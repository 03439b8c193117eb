#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#
from .WithHarvesterDriver import WithHarvesterDriver

SPINNER_CSS = 'i.icon-spinner'


class Displayable(WithHarvesterDriver):
    def is_displayed(self):
        # False until a page object knows how to recognize itself
        return False

    def get_displayable_name(self):
        return 'Displayable'

    def is_loading(self, container_css=''):
        """The dashboard renders tables and dialogs before their data arrives,
        a spinner inside container_css means the content is not there yet.
        """
        return self.harvester_driver.is_css_selector_present(f'{container_css} {SPINNER_CSS}'.strip())

    def wait_for_displayed(self, wait_long=False):
        wait_until = self.harvester_driver.wait_long_until if wait_long else self.harvester_driver.wait_until
        wait_until(
            f'{self.get_displayable_name()} is not displayed',
            self.is_displayed,
        )

    def wait_for_not_displayed(self):
        self.harvester_driver.wait_while(
            f'{self.get_displayable_name()} is still displayed',
            self.harvester_driver.retry_if_known_issue,
            self.is_displayed,
        )

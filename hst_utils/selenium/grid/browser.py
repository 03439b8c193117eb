#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#
#

import functools
import os

from selenium import webdriver

SUPPORTED_BROWSERS = ('chrome', 'firefox')


def _headless():
    return os.environ.get('HST_BROWSER_HEADLESS', '').lower() in ('1', 'true', 'yes')


@functools.cache
def firefox_options():
    options = webdriver.FirefoxOptions()
    options.set_capability('browserName', 'firefox')
    # harvester serves a self-signed certificate by default
    options.set_capability('acceptInsecureCerts', True)

    options.set_preference('devtools.console.stdout.content', True)
    if _headless():
        options.add_argument('-headless')
    return options


@functools.cache
def chrome_options():
    options = webdriver.ChromeOptions()
    options.set_capability('acceptInsecureCerts', True)
    options.set_capability(
        'goog:loggingPrefs',
        {
            'browser': 'ALL',
            'performance': 'ALL',
        },
    )

    # note: response body is not logged
    options.add_experimental_option('perfLoggingPrefs', {'enableNetwork': True, 'enablePage': True})
    if _headless():
        options.add_argument('--headless=new')
    return options


def options_for(browser_name):
    if browser_name == 'chrome':
        return chrome_options()
    if browser_name == 'firefox':
        return firefox_options()
    raise ValueError(f'Unsupported browser {browser_name}, use one of {", ".join(SUPPORTED_BROWSERS)}')

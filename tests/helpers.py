#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#

from unittest import mock


def element(text='', **attributes):
    el = mock.MagicMock()
    el.text = text
    el.get_attribute.side_effect = attributes.get
    return el


def by_xpath(mapping, default=None):
    """side_effect picking the result whose key is part of the xpath."""

    def lookup(by, value):
        for key, result in mapping.items():
            if key in value:
                if isinstance(result, Exception):
                    raise result
                return result
        if isinstance(default, Exception):
            raise default
        return default

    return lookup

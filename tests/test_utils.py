#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#

import re

from hst_utils import utils

DNS_LABEL = re.compile(r'^[a-z0-9]([-a-z0-9]*[a-z0-9])?$')


def test_generate_name_appends_random_suffix():
    name = utils.generate_name('vm-e2e-1')

    assert name.startswith('vm-e2e-1-')
    assert len(name) == len('vm-e2e-1-') + utils.SUFFIX_LENGTH
    assert DNS_LABEL.match(name)


def test_generate_name_is_unique_per_call():
    names = {utils.generate_name('volume-export-image') for _ in range(50)}

    assert len(names) == 50


def test_generate_name_normalizes_prefix():
    name = utils.generate_name('Volume_Export Image')

    assert name.startswith('volume-export-image-')
    assert DNS_LABEL.match(name)


def test_generate_name_fits_kubernetes_name_length():
    name = utils.generate_name('x' * 100)

    assert len(name) <= utils.MAX_NAME_LENGTH
    assert DNS_LABEL.match(name)


def test_generate_name_without_usable_prefix():
    name = utils.generate_name('---')

    assert len(name) == utils.SUFFIX_LENGTH


def test_size_label():
    assert utils.size_label('20') == '20 Gi'
    assert utils.size_label(10, 'GB') == '10 GB'

#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#
#

import random
import re
import string

# kubernetes object names are DNS-1123 labels
MAX_NAME_LENGTH = 63
SUFFIX_LENGTH = 5

_SUFFIX_CHARS = string.ascii_lowercase + string.digits
_INVALID_CHARS = re.compile(r'[^a-z0-9-]+')


def generate_name(prefix):
    """Return a name unique for this run, e.g. ``vm-e2e-1-k3x9a``.

    Objects created by one run must not clash with leftovers of another
    run on the same cluster, so every name gets a random suffix.
    """
    prefix = _INVALID_CHARS.sub('-', prefix.lower()).strip('-')
    prefix = prefix[: MAX_NAME_LENGTH - SUFFIX_LENGTH - 1].rstrip('-')
    suffix = ''.join(random.choice(_SUFFIX_CHARS) for _ in range(SUFFIX_LENGTH))
    if not prefix:
        return suffix
    return f'{prefix}-{suffix}'


def size_label(size, unit='Gi'):
    return f'{size} {unit}'

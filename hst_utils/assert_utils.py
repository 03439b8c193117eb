#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#
#

import logging
import os
import time


LOGGER = logging.getLogger(__name__)

# image downloads and VM boots on nested setups are slow, allow tuning
SHORT_TIMEOUT = int(os.environ.get('HST_SHORT_TIMEOUT', 3 * 60))
LONG_TIMEOUT = int(os.environ.get('HST_LONG_TIMEOUT', 10 * 60))


def true_within_short(func, allowed_exceptions=None, error_message=None):
    return equals_within_short(func, True, allowed_exceptions, error_message)


def equals_within_short(func, expected_value, allowed_exceptions=None, error_message=None):
    return EqualsWithin(func, expected_value, SHORT_TIMEOUT, allowed_exceptions, error_message)


def true_within_long(func, allowed_exceptions=None, error_message=None):
    return equals_within_long(func, True, allowed_exceptions, error_message)


def equals_within_long(func, expected_value, allowed_exceptions=None, error_message=None):
    return EqualsWithin(func, expected_value, LONG_TIMEOUT, allowed_exceptions, error_message)


def true_within(func, timeout, allowed_exceptions=None, error_message=None, sleep_interval=3):
    return EqualsWithin(func, True, timeout, allowed_exceptions, error_message, sleep_interval)


class EqualsWithin:
    """Poll func until it returns expected_value or timeout seconds pass.

    The instance is truthy on success, and its repr explains the outcome so
    that a bare ``assert equals_within_long(...)`` gives a useful report.
    """

    def __init__(
        self,
        func,
        expected_value,
        timeout,
        allowed_exceptions=None,
        error_message=None,
        sleep_interval=3,
    ):
        self.expected_value = expected_value
        self.error_message = error_message
        self.func_name = getattr(func, '__name__', repr(func))
        self.attempts = 0
        self.returned_value = '<no-result-obtained>'

        allowed_exceptions = tuple(allowed_exceptions or ())
        with _EggTimer(timeout) as timer:
            while not timer.elapsed():
                self.attempts += 1
                try:
                    self.returned_value = func()
                    if self.returned_value == self.expected_value:
                        break
                except allowed_exceptions as exc:
                    LOGGER.debug('%s raised allowed %s, retrying', self.func_name, exc.__class__.__name__)
                except Exception:
                    LOGGER.exception('Unexpected exception in %s', self.func_name)
                    raise

                time.sleep(sleep_interval)

        if self.error_message is None:
            self.error_message = (
                f'{self.func_name}() -> {self.returned_value!r} != '
                f'{self.expected_value!r} after {timeout} seconds ({self.attempts} attempts)'
            )

    def __bool__(self):
        return self.returned_value == self.expected_value

    def __repr__(self):
        if bool(self):
            return f'{self.func_name}() -> {self.expected_value!r} == {self.expected_value!r}'
        return self.error_message


class _EggTimer:
    def __init__(self, timeout):
        self.timeout = timeout

    def __enter__(self):
        self.start_time = time.monotonic()
        return self

    def __exit__(self, *_):
        pass

    def elapsed(self):
        return (time.monotonic() - self.start_time) > self.timeout

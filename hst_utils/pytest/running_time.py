#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#
#

import datetime

import logging

LOGGER = logging.getLogger(__name__)

SLOWEST_SCENARIOS_SHOWN = 10

STARTED_AT = {}
DURATIONS = {}


def pytest_runtest_logstart(nodeid, location):
    now = datetime.datetime.now()
    STARTED_AT[nodeid] = now
    print(now.strftime('started at %Y-%m-%d %H:%M:%S'), end=' ')
    LOGGER.debug(f'Running scenario: {nodeid}')


def pytest_runtest_logfinish(nodeid, location):
    now = datetime.datetime.now()
    delta = int((now - STARTED_AT.pop(nodeid, now)).total_seconds())
    DURATIONS[nodeid] = delta
    print(f' ({delta}s)', end='')
    LOGGER.debug(f'Finished scenario: {nodeid} ({delta}s)')


def pytest_terminal_summary(terminalreporter):
    if not DURATIONS:
        return
    # browser scenarios take minutes, keep the slow ones visible in CI logs
    slowest = sorted(DURATIONS.items(), key=lambda item: item[1], reverse=True)
    terminalreporter.write_sep('=', 'slowest scenarios')
    for nodeid, delta in slowest[:SLOWEST_SCENARIOS_SHOWN]:
        terminalreporter.write_line(f'{delta:>6}s {nodeid}')
    terminalreporter.write_line(f'{sum(DURATIONS.values()):>6}s total')

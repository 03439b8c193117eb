#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#
#

DEFAULT_NAMESPACE = 'default'

DEFAULT_IMAGE_NAME = 'ubuntu-18.04-server-cloudimg-amd64.img'
DEFAULT_IMAGE_URL = (
    'https://cloud-images.ubuntu.com/releases/18.04/release/' + DEFAULT_IMAGE_NAME
)

HARVESTER_PRODUCT_ROUTE = '/dashboard/c/local/harvester'
VM_RESOURCE = 'kubevirt.io.virtualmachine'
IMAGE_RESOURCE = 'harvesterhci.io.virtualmachineimage'
VOLUME_RESOURCE = 'persistentvolumeclaim'

VM_STATE_RUNNING = 'Running'
VM_STATE_OFF = 'Off'
# states a VM passes through when it is restarted
VM_RESTART_STATES = ('Stopping', 'Starting', 'Restarting', 'Off')
IMAGE_STATE_ACTIVE = 'Active'
VOLUME_STATE_READY = 'Ready'

# root disks created through the VM form are named <vm>-disk-0-<random>
ROOT_DISK_INFIX = '-disk-0-'

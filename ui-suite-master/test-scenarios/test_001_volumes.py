#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#
#

import logging

from hst_utils import assert_utils
from hst_utils import constants
from hst_utils.entities import ImageSpec
from hst_utils.entities import VmSpec
from hst_utils.entities import VolumeSpec
from hst_utils.utils import generate_name

LOGGER = logging.getLogger(__name__)


def _vm(name, image, namespace):
    return VmSpec(name=name, cpu='2', memory='4', image=image, namespace=namespace)


def test_create_image_from_volume(vms_page, image_page, harvester_image, harvester_namespace, save_screenshot):
    """
    1. Create new VM
    2. Export volume to image from volumes page
    3. Create new VM from image
    Expected Results
    1. image should upload/complete in images page
    2. New VM should create
    """
    image_name = generate_name('volume-export-image')
    vm_name = generate_name('volume-export-vm')
    another_vm_name = generate_name('volume-export-vm-2')
    namespace = harvester_namespace

    vms_page.init(harvester_image)

    vms_page.create(_vm(vm_name, harvester_image.name, namespace))
    vms_page.wait_for_state(vm_name, constants.VM_STATE_RUNNING)
    vm_form = vms_page.go_to_config_detail(vm_name)
    assert vm_form.get_name() == vm_name
    assert vm_form.get_cpu() == '2'
    assert vm_form.get_memory() == '4'
    vm_form.cancel()

    yaml_view = vms_page.go_to_yaml_detail(vm_name)
    assert f'name: {vm_name}' in yaml_view.get_text()
    yaml_view.cancel()

    image_page.export_image(vm_name, image_name, namespace)

    image_page.go_to_list()
    image_page.check_state(ImageSpec(name=image_name, size='10 GB', namespace=namespace))
    save_screenshot('exported-image')

    vms_page.create(_vm(another_vm_name, image_name, namespace))
    vms_page.wait_for_state(another_vm_name, constants.VM_STATE_RUNNING)
    vm_form = vms_page.go_to_config_detail(another_vm_name)
    assert vm_form.get_name() == another_vm_name

    vms_page.delete(namespace, another_vm_name)
    vms_page.delete(namespace, vm_name)
    image_page.delete(image_name)


def test_create_volume_from_image(volume_page, boot_image, harvester_namespace):
    """
    1. Navigate to volumes page
    2. Click Create
    3. Select an image
    4. Input a size
    5. Click Create
    Expected Results
    1. Page should load
    2. Volume should create successfully and go to Ready in the list
    """
    volume = VolumeSpec(
        name=generate_name('volume-e2e-1'),
        size='10',
        image=boot_image.name,
        namespace=harvester_namespace,
    )

    volume_page.create(volume)
    volume_page.check_state(volume)

    volume_page.delete(harvester_namespace, volume.name)


def test_delete_volume_detached_from_deleted_vm(vms_page, volume_page, boot_image, harvester_namespace):
    """
    1. Create a VM with a root volume
    2. Delete the VM but not the volume
    3. Verify Volume still exists
    4. Delete the volume
    Expected Results
    1. VM should create
    2. VM should delete
    3. Volume should still show in Volume list
    4. Volume should delete
    """
    vm_name = generate_name('vm-e2e-1')

    vms_page.create(_vm(vm_name, boot_image.name, harvester_namespace))
    vms_page.go_to_config_detail(vm_name)

    vms_page.delete(harvester_namespace, vm_name, remove_root_disk=False)

    root_volume = volume_page.check_state_by_vm(vm_name)
    assert root_volume.startswith(vm_name)

    volume_page.delete_volume_by_vm(vm_name)
    assert not volume_page.has_entity(root_volume)


def test_volume_hot_unplug(vms_page, volume_page, boot_image, harvester_namespace, save_screenshot):
    """
    1. Create a virtual machine
    2. Create several volumes (without image)
    3. Add volume, hot-plug volume to virtual machine
    4. Open virtual machine, find hot-plugged volume
    5. Click de-attach volume
    6. Add volume again
    Expected Results
    1. Can hot-plug volume without error
    2. Can hot-unplug the pluggable volumes without restarting VM
    3. The de-attached volume can also be hot-plug and mount back to VM
    """
    vm_name = generate_name('vm-e2e-1')
    first_volume = VolumeSpec(name=generate_name('hotplug-e2e-1'), size='10', namespace=harvester_namespace)
    second_volume = VolumeSpec(name=generate_name('hotplug-e2e-2'), size='10', namespace=harvester_namespace)
    volume_names = [first_volume.name, second_volume.name]

    volume_page.create(first_volume)
    volume_page.check_state(first_volume)

    volume_page.create(second_volume)
    volume_page.check_state(second_volume)

    vms_page.create(_vm(vm_name, boot_image.name, harvester_namespace))
    vms_page.go_to_config_detail(vm_name)
    vms_page.go_to_list()
    vms_page.wait_for_state(vm_name, constants.VM_STATE_RUNNING)

    vms_page.plug_volume(vm_name, volume_names, harvester_namespace)
    save_screenshot('hot-plugged-volumes')
    seen_states = vms_page.unplug_volume(vm_name, volume_names, harvester_namespace)

    # unplugging must not restart the VM
    assert not set(seen_states) & set(constants.VM_RESTART_STATES), seen_states
    vms_page.go_to_list()
    assert vms_page.get_state(vm_name) == constants.VM_STATE_RUNNING

    vms_page.plug_volume(vm_name, volume_names, harvester_namespace)

    vms_page.delete(harvester_namespace, vm_name)
    volume_page.delete(harvester_namespace, first_volume.name)
    volume_page.delete(harvester_namespace, second_volume.name)


def test_edit_volume_increase_size_via_form(vms_page, volume_page, boot_image, harvester_namespace):
    """
    1. Stop the vm
    2. Navigate to volumes page
    3. Edit Volume via form
    4. Increase size
    5. Click Save
    Expected Results
    1. Disk should be resized
    """
    vm_name = generate_name('vm-e2e-1')

    vms_page.create(_vm(vm_name, boot_image.name, harvester_namespace))
    vms_page.go_to_config_detail(vm_name)
    vms_page.go_to_list()
    vms_page.wait_for_state(vm_name, constants.VM_STATE_RUNNING)

    vms_page.click_action(vm_name, 'Stop')
    assert assert_utils.equals_within_long(lambda: vms_page.get_state(vm_name), constants.VM_STATE_OFF)

    volume_page.go_to_edit_by_vm_name(vm_name)
    volume_page.increase_size('20', harvester_namespace)

    vms_page.delete(harvester_namespace, vm_name)

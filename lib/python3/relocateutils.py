#!/bin/env python3

import enum

import pyVmomi

import vmwareutils
import taskutils


MOVE_CHILD_MOST  = "moveChildMostDiskBacking"
MOVE_ALL_SHARING = "moveAllDiskBackingsAndAllowSharing"

#
#	Accepted spelling -> vSphere diskMoveType value.  Matched ignoring case
#
DISK_MOVE_TYPES = {
	MOVE_CHILD_MOST                            : MOVE_CHILD_MOST,
	"move-child-most-disk-backing"             : MOVE_CHILD_MOST,
	MOVE_ALL_SHARING                           : MOVE_ALL_SHARING,
	"move-all-disk-backings-and-allow-sharing" : MOVE_ALL_SHARING,
	}


class RelocateResult(enum.Enum):
	SUCCESS   = "success"
	FAILURE   = "failure"
	NOT_FOUND = "not-found"
	DRY_RUN   = "dry-run"


#
#----------------------------------------------------------------------
#

def normalize_disk_move_type(value):
	if (value is None):
		return None

	for (k,v) in DISK_MOVE_TYPES.items():
		if (k.lower() == value.lower()):
			return v

	return None


def check_disk_move_type(value):
	ok = (normalize_disk_move_type(value) is not None)

	if (not ok):
		print("diskmovetype option must be either " + MOVE_CHILD_MOST +
		      " or " + MOVE_ALL_SHARING)

	return ok


def build_relocate_spec(datastore, disk_move_type):
	if (datastore is None):
		raise ValueError("A target datastore is required")

	move_type = normalize_disk_move_type(disk_move_type)

	if (move_type is None):
		raise ValueError("Invalid disk move type '" + str(disk_move_type) + "'")

	spec = pyVmomi.vim.vm.RelocateSpec()

	spec.datastore    = datastore
	spec.diskMoveType = move_type

	return spec


#
#----------------------------------------------------------------------
#

#
#	Relocate vm_name's disks onto datastore_name using disk_move_type.
#
#	Missing objects are reported and give NOT_FOUND.  A task that ends
#	with a fault raises taskutils.TaskFault; one that outlives timeout
#	raises taskutils.TaskTimeout.
#
def relocate_vm(context, vm_name, datastore_name, disk_move_type,
		timeout=None, dry_run=False, verbose=False):

	if (not check_disk_move_type(disk_move_type)):
		raise ValueError("Invalid disk move type '" + str(disk_move_type) + "'")

	vm = vmwareutils.get_vm(context, vm_name)

	if (vm is None):
		print("Virtual Machine " + vm_name + " doesn't exist")
		return RelocateResult.NOT_FOUND

	ds = vmwareutils.get_datastore(context, datastore_name)

	if (ds is None):
		print("Datastore " + datastore_name + " Not Found")
		return RelocateResult.NOT_FOUND

	spec = build_relocate_spec(ds, disk_move_type)

	if (dry_run):
		print("Dryrun: would relocate", vm_name, "to", datastore_name,
		      "(" + spec.diskMoveType + ")")
		return RelocateResult.DRY_RUN

	if (verbose):
		print("Relocating", vm_name, "to", datastore_name,
		      "(" + spec.diskMoveType + ")")

	task = vm.RelocateVM_Task(spec=spec)

	if (taskutils.get_task_result_after_done(context, task, timeout)):
		print("Linked Clone relocated successfully.")
		return RelocateResult.SUCCESS
	else:
		print("Failure -: Linked clone cannot be relocated")
		return RelocateResult.FAILURE

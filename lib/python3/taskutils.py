#!/bin/env python3

import time

from pyVmomi import vim, vmodl


class TaskError(Exception):
	pass


class TaskFault(TaskError):
	"""
	A vSphere task finished with info.error set.  The original
	vmodl.MethodFault is kept in .fault
	"""

	def __init__(self, fault):
		self.fault = fault
		super().__init__(fault_message(fault))


class TaskTimeout(TaskError):
	def __init__(self, timeout):
		self.timeout = timeout
		super().__init__("Task did not finish within " + str(timeout) + " seconds")


def fault_message(fault):
	msg = getattr(fault, "msg", None)

	if (not msg):
		msg = str(fault)

	return msg


#
#----------------------------------------------------------------------
#

#
#	Block until one of end_wait_props reaches one of its expected values.
#
#	obj            = managed object to watch (e.g. a vim.Task)
#	filter_props   = property paths whose final values are returned
#	end_wait_props = property paths tested against expected_vals
#	expected_vals  = one list of acceptable values per end_wait_prop
#	timeout        = seconds, or None to wait forever
#
def wait_for_values(context, obj, filter_props, end_wait_props, expected_vals,
		    timeout=None):
	pc = context.propertyCollector
	vpc = vmodl.query.PropertyCollector

	obj_spec  = vpc.ObjectSpec(obj=obj, skip=False)
	prop_spec = vpc.PropertySpec(type=type(obj), pathSet=filter_props, all=False)

	filter_spec = vpc.FilterSpec(objectSet=[obj_spec], propSet=[prop_spec])

	pc_filter = pc.CreateFilter(filter_spec, True)

	if (timeout is not None):
		deadline = time.monotonic() + timeout

	values = {}
	version = ""

	try:
		while (not _reached(values, end_wait_props, expected_vals)):
			options = vpc.WaitOptions()

			if (timeout is not None):
				remaining = deadline - time.monotonic()
				if (remaining <= 0):
					raise TaskTimeout(timeout)
				options.maxWaitSeconds = max(1, int(remaining))

			update = pc.WaitForUpdatesEx(version, options)

			# None means maxWaitSeconds passed with no change
			if (update is None):
				continue

			version = update.version

			for filter_set in update.filterSet:
				for obj_set in filter_set.objectSet:
					for change in obj_set.changeSet:
						if (change.op == "remove"):
							values[change.name] = None
						else:
							values[change.name] = change.val
	finally:
		pc_filter.Destroy()

	return [values.get(p, None) for p in filter_props]


def _reached(values, end_wait_props, expected_vals):
	for (prop, expected) in zip(end_wait_props, expected_vals):
		if (prop in values) and (values[prop] in expected):
			return True

	return False


#
#----------------------------------------------------------------------
#

#
#	Wait for a task to finish.  Returns True on success, False on error.
#	A populated info.error always raises TaskFault, even on "success".
#
def get_task_result_after_done(context, task, timeout=None):
	(state, error) = wait_for_values(context, task,
			["info.state", "info.error"],
			["info.state"],
			[[vim.TaskInfo.State.success, vim.TaskInfo.State.error]],
			timeout)

	if (error is not None):
		raise TaskFault(error)

	return (state == vim.TaskInfo.State.success)

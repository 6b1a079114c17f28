#!/usr/bin/env python3

#
#	Relocate a linked clone to another datastore, choosing whether only
#	its child-most (delta) disks move or every disk backing moves while
#	keeping shared backings shared.
#

import argparse
import sys

import forgiveChoices
import loginutils
import relocateutils
import taskutils


EXIT_OK      = 0
EXIT_FAILURE = 1
EXIT_TIMEOUT = 3


def positive_seconds(s):
	v = float(s)

	if (v <= 0):
		raise argparse.ArgumentTypeError("timeout must be greater than 0")

	return v

def parse_args(argv=None):
	parser = argparse.ArgumentParser(
			prog='relocate-linked-clone',
			description='Relocate a linked clone using a disk move type')

	parser.add_argument('--url', required=True,
		help='URL of the web service (e.g. https://vcsa.example.com/sdk)')

	parser.add_argument('--username', required=True,
		help='Username for the authentication')

	parser.add_argument('--password', required=True,
		help='Password for the authentication ("" to be prompted)')

	parser.add_argument('--vmname', required=True,
		help='Name of the virtual machine')

	parser.add_argument('--diskmovetype', required=True,
		choices=forgiveChoices.forgive_choice_list(relocateutils.DISK_MOVE_TYPES),
		action=forgiveChoices.forgive_choice_action,
		help='Either of [' + relocateutils.MOVE_CHILD_MOST + ' | ' +
		     relocateutils.MOVE_ALL_SHARING + '] (case insensitive)')

	parser.add_argument('--datastorename', required=True,
		help='Name of the datastore')

	parser.add_argument('--timeout', type=positive_seconds, default=None,
		help='Give up waiting on the relocation task after this many ' + \
		     'seconds (def=wait forever)')

	parser.add_argument('--dry-run', default=False, action="store_true",
		help='Look up the VM and datastore, but do not relocate')

	parser.add_argument('--verify-ssl', default=False, action="store_true",
		help='Check the server certificate')

	parser.add_argument('--verbose', '-v', default=False,
		action="store_true")

	return parser.parse_args(argv)

#
#----------------------------------------------------------------------
#

def main(argv=None):
	args = parse_args(argv)

	context = loginutils.simplelogin(args.url, args.username, args.password,
					 args.verify_ssl)

	try:
		result = relocateutils.relocate_vm(context, args.vmname,
				args.datastorename, args.diskmovetype,
				timeout=args.timeout, dry_run=args.dry_run,
				verbose=args.verbose)

	except taskutils.TaskTimeout as e:
		print("!!! " + str(e), file=sys.stderr)
		return EXIT_TIMEOUT

	except taskutils.TaskFault as e:
		print("!!! " + str(e), file=sys.stderr)
		return EXIT_FAILURE

	if (result == relocateutils.RelocateResult.FAILURE):
		return EXIT_FAILURE

	return EXIT_OK


def run():
	sys.exit(main())


if __name__ == "__main__":
	run()

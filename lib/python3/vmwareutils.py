#!/bin/env python3

import pyVmomi
import pyVim
import pyVim.connect

import requests
import getpass
import atexit
import urllib.parse


DEFAULT_PORT = 443
DEFAULT_PATH = "/sdk"


#
#----------------------------------------------------------------------
#

#
#	Split a service URL into (protocol, host, port, path).  Accepts
#	"https://vc.example.com/sdk", "vc.example.com:8443" or just a host name
#
def parse_service_url(url):
	if ("://" not in url):
		url = "https://" + url

	parts = urllib.parse.urlsplit(url)

	if (not parts.hostname):
		raise ValueError("No host in service URL '" + url + "'")

	protocol = parts.scheme or "https"
	port     = parts.port or DEFAULT_PORT
	path     = parts.path.rstrip("/") or DEFAULT_PATH

	return (protocol, parts.hostname, port, path)


#
#	Log into the VCSA behind url.  The returned ServiceContent is the
#	context handed to every other call; the session is closed at exit.
#
def vmware_login(url, user, passwd="", verify_ssl=False):
	(protocol, host, port, path) = parse_service_url(url)

	if (not verify_ssl):
		requests.packages.urllib3.disable_warnings(
			requests.packages.urllib3.exceptions.InsecureRequestWarning)

	if (passwd == ""):
		passwd = getpass.getpass("Enter " + user + " password: ")

	si = pyVim.connect.SmartConnect(protocol=protocol, host=host, port=port,
					path=path, user=user, pwd=passwd,
					disableSslCertValidation=not verify_ssl)

	atexit.register(pyVim.connect.Disconnect, si)

	content = si.RetrieveContent()

	return content


#
#----------------------------------------------------------------------
#

# https://github.com/vmware/pyvmomi-community-samples/blob/master/samples/create_folder_in_datacenter.py

#
#	Map display name -> managed object for every object of the given
#	type(s) under parent (default: the root folder).  When two objects
#	share a name, the first one the server lists wins.
#
def name_to_obj_map(content, vimtypes, parent=None):

	# If vimtypes is not a list, make it one
	if (not isinstance(vimtypes, list)):
		vimtypes = [vimtypes]

	if (parent is None):
		parent = content.rootFolder

	container = content.viewManager.CreateContainerView(
		parent, vimtypes, True)

	objs = {}

	try:
		for c in container.view:
			if (c.name not in objs):
				objs[c.name] = c
	finally:
		container.Destroy()

	return objs


def get_obj(content, vimtypes, name, parent=None):
	return name_to_obj_map(content, vimtypes, parent).get(name, None)


def get_vm(content, name):
	return get_obj(content, [pyVmomi.vim.VirtualMachine], name)

def get_datastore(content, name):
	return get_obj(content, [pyVmomi.vim.Datastore], name)


import vmwareutils
import getpass


def simplelogin(url, username=None, passwd="", verify_ssl=False):
	if (not username):
		username = input("Enter username: ")

	if (passwd == ""):
		passwd = getpass.getpass("Enter password for '" +username+"' : ")

	context = vmwareutils.vmware_login(url, username, passwd, verify_ssl)

	return context

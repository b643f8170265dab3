import logging


def parse_lifetime(lifetime_str):
	if (type(lifetime_str) in (int, float)):
		lifetime = float(lifetime_str)
	elif lifetime_str.lower() in ('inf', 'infinity', 'infinite'):
		return 100*365*24*60*60
	else:
		try:
			lifetime = float(lifetime_str)
		except ValueError:
			raise ValueError("invalid lifetime specifier")

	if lifetime < 0:
		raise ValueError("invalid lifetime specifier")
	return lifetime


def parse_log_level(log_level):
	levels = {
		'error': logging.ERROR,
		'warning': logging.WARNING,
		'info': logging.INFO,
		'debug': logging.DEBUG,
	}
	try:
		return levels[str(log_level).strip().lower()]
	except KeyError:
		raise ValueError("invalid log level")


# Arguments may arrive as strings from the command line, where "False" would otherwise be truthy.
def parse_bool(value):
	if (isinstance(value, bool)):
		return value
	if (isinstance(value, int)):
		return value != 0

	value = str(value).strip().lower()
	if value in ('1', 'true', 'yes', 'on'):
		return True
	if value in ('0', 'false', 'no', 'off', ''):
		return False
	raise ValueError("invalid boolean")


def parse_count(count_str):
	try:
		return int(count_str)
	except (TypeError, ValueError):
		raise ValueError("invalid count")

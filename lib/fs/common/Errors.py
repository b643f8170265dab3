"""
lib/fs/common/Errors.py

Purpose:
Defines the two error kinds of the engine.

Place in Architecture:
NotFound is what every operation raises toward the transport. It is an IOError carrying ENOENT, so the FuseMethod wrapper turns it into -ENOENT like any other OSError.
InvariantViolation is only raised while building or projecting a tree and must abort startup.

Interface:

	NotFound(message): IOError with errno.ENOENT.
	InvariantViolation(message): construction-time failure.

TODOs/FIXMEs:
None.
"""

import errno

class NotFound(IOError):
	def __init__(this, message="no such file or directory"):
		super().__init__(errno.ENOENT, message)


class InvariantViolation(Exception):
	pass

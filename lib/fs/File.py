"""
lib/fs/File.py

Purpose:
Implements a File inode (subclass of Inode) specialized for files.

Place in Architecture:
Holds the template a file renders from and the vitality counter the StateEngine advances. The File itself never renders anything; see StateEngine.

Interface:

	__init__(id, name, template="", vitality=5): Initializes a File.
	remaining: Pets still needed, i.e. the counter floored at zero.
	state: The Vitality of the current counter.

TODOs/FIXMEs:
None.
"""

from .common.Inode import *
from .common.Vitality import Vitality

DEFAULT_VITALITY = 5

class File (Inode):
	kind = InodeKind.FILE

	def __init__(this, id, name, template="", vitality=DEFAULT_VITALITY):
		super().__init__(id, name)

		this.template = template
		this.vitality = int(vitality) # Only the StateEngine may change this after build.

	@property
	def remaining(this):
		return max(this.vitality, 0)

	@property
	def state(this):
		return Vitality.Of(this.vitality)

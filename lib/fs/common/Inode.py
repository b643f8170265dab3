"""
lib/fs/common/Inode.py

Purpose:
Provides the fields shared by both kinds of filesystem node (directories and files): identity, naming and parent lookup.

Place in Architecture:
A core part of the FS layer. Nodes never hold references to one another. Parents and children are plain inode numbers, and the InodeTable is the only owner of node objects.

Interface:

	__init__(id, name): Initializes a node with its inode number and name.
	kind: The InodeKind of the node. Fixed per subclass.
	IsRoot(): True when the node has no parent.
	SetParent(parent): One-time wiring done by the TreeBuilder.

TODOs/FIXMEs:
None.
"""

from enum import Enum

from .Errors import InvariantViolation

class InodeKind(Enum):
	DIRECTORY = 'dir'
	FILE = 'file'

	def __str__(self):
		return self.value


# Inode is the identity half of a node. Behaviour is not attached here.
# Everything that depends on the kind (rendering, listing) matches on this.kind instead.
class Inode(object):
	kind = None

	def __init__(this, id, name):
		if (not isinstance(id, int) or id < 1):
			raise InvariantViolation(f"Invalid inode number {id!r} for {name!r}")
		if (not name or not isinstance(name, str)):
			raise InvariantViolation(f"Inode {id} needs a non-empty name")
		if (name in (".", "..") or "/" in name):
			raise InvariantViolation(f"Inode {id} cannot be named {name!r}")

		this.id = id
		this.name = name
		this.parent = None # numeric id of the containing directory. None only for the root.

	def __repr__(this):
		return f"<{this.__class__.__name__} {this.name} ({this.id})>"

	def IsRoot(this):
		return this.parent is None

	# Parents are assigned exactly once, while the tree is being built.
	def SetParent(this, parent):
		if (this.parent is not None and this.parent != parent):
			raise InvariantViolation(f"{this!r} already belongs to inode {this.parent}; cannot move it under {parent}")
		this.parent = parent

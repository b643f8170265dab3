"""
lib/fs/Directory.py

Purpose:
Implements a Directory inode (subclass of Inode) specialized for directories.

Place in Architecture:
Represents directories of the synthetic tree. It stores the ordered list of its children's inode numbers; the order is fixed once the tree is built and is the order used for listing.

Interface:

	__init__(id, name): Initializes an empty Directory.
	AddChild(child): Appends a child node and points the child back at *this.
	HasChild(id): Membership test by inode number.

TODOs/FIXMEs:
None.
"""

from .common.Inode import *

class Directory (Inode):
	kind = InodeKind.DIRECTORY

	def __init__(this, id, name):
		super().__init__(id, name)

		this.children = [] # List of numeric ids of all the children of *this.

	def AddChild(this, child):
		if (child.id in this.children):
			raise InvariantViolation(f"{child!r} is already a child of {this!r}")
		child.SetParent(this.id)
		this.children.append(child.id)

	def HasChild(this, id):
		return id in this.children

"""
lib/InodeTable.py

Purpose:
Flattens a built Tree into the two lookup tables the engine serves from: inode -> node, and directory inode -> ordered child inodes.

Place in Architecture:
Sits between the TreeBuilder and the StateEngine. It is built once and never changes shape afterwards; only the counters inside its File nodes move.
This is also where a broken tree is caught. Any inconsistency raises InvariantViolation before anything is mounted.

Interface:

	InodeTable.Project(tree): RETURNS a new InodeTable. Validates the tree.
	Get(id): node or None.
	Require(id, kind=None): node, or NotFound if absent or of the wrong kind.
	ChildrenOf(id): tuple of child inodes of a directory.
	ChildNamed(id, name): the child node called *name*, or None.
	Files(): all File nodes.

TODOs/FIXMEs:
None.
"""

import logging

from .fs.common.Inode import InodeKind
from .fs.common.Errors import NotFound, InvariantViolation


class InodeTable(object):
	def __init__(this, root, by_inode, by_parent):
		this.root = root
		this.by_inode = by_inode # id -> Directory | File
		this.by_parent = by_parent # directory id -> tuple of child ids, in stored order

		# name lookups per directory, so Lookup does not scan every sibling.
		this.by_name = {
			parent: {by_inode[child].name: child for child in children}
			for parent, children in by_parent.items()
		}

	def __len__(this):
		return len(this.by_inode)

	def __contains__(this, id):
		return id in this.by_inode

	@classmethod
	def Project(cls, tree):
		by_inode = {}
		for node in tree:
			if (node.id in by_inode):
				raise InvariantViolation(f"Inode {node.id} is shared by {by_inode[node.id]!r} and {node!r}")
			by_inode[node.id] = node

		if (tree.root not in by_inode):
			raise InvariantViolation(f"Root inode {tree.root} is not part of the tree")
		if (by_inode[tree.root].kind is not InodeKind.DIRECTORY):
			raise InvariantViolation(f"Root inode {tree.root} is not a directory")
		if (min(by_inode) != tree.root):
			raise InvariantViolation(f"Root inode {tree.root} is not the smallest inode ({min(by_inode)})")

		by_parent = {}
		for node in by_inode.values():
			if (node.kind is not InodeKind.DIRECTORY):
				continue

			names = set()
			for child_id in node.children:
				child = by_inode.get(child_id)
				if (child is None):
					raise InvariantViolation(f"{node!r} lists unknown child inode {child_id}")
				if (child.parent != node.id):
					raise InvariantViolation(f"{node!r} lists {child!r}, whose parent is {child.parent}")
				if (child.name in names):
					raise InvariantViolation(f"{node!r} has more than one child named {child.name!r}")
				names.add(child.name)

			if (len(set(node.children)) != len(node.children)):
				raise InvariantViolation(f"{node!r} lists a child more than once")
			by_parent[node.id] = tuple(node.children)

		for node in by_inode.values():
			if (node.id == tree.root):
				if (node.parent is not None):
					raise InvariantViolation(f"Root {node!r} has a parent ({node.parent})")
				continue
			if (node.parent is None):
				raise InvariantViolation(f"{node!r} has no parent")
			if (node.parent not in by_parent):
				raise InvariantViolation(f"{node!r} points at parent {node.parent}, which is not a directory in the tree")
			if (not by_inode[node.parent].HasChild(node.id)):
				raise InvariantViolation(f"{node!r} is missing from its parent's children")

		logging.info(f"Projected {len(by_inode)} inodes ({len(by_parent)} directories)")
		return cls(tree.root, by_inode, by_parent)

	def Get(this, id):
		return this.by_inode.get(id)

	# RETURNS the node with the given id, checking its kind if one is given.
	# Raises NotFound otherwise; to a client, a file asked to act like a directory does not exist.
	def Require(this, id, kind=None):
		node = this.by_inode.get(id)
		if (node is None):
			raise NotFound(f"no inode {id}")
		if (kind is not None and node.kind is not kind):
			raise NotFound(f"inode {id} is not a {kind}")
		return node

	def ChildrenOf(this, id):
		return this.by_parent[id]

	def ChildNamed(this, id, name):
		child = this.by_name.get(id, {}).get(name)
		if (child is None):
			return None
		return this.by_inode[child]

	def Files(this):
		return [node for node in this.by_inode.values() if node.kind is InodeKind.FILE]

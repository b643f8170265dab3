"""
lib/KittyFS.py

Purpose:
Implements the KittyFS engine: a synthetic filesystem whose files are kitties that change what they say as they get petted.

Place in Architecture:
The single object the transport talks to. It owns the InodeTable and the StateEngine, and serializes every operation behind one lock so a multithreaded FUSE loop never sees a half-applied write.

Interface:

	__init__(tree, journal, greeting, ttl): Projects *tree* and prepares the engine.
	FromBlueprint(blueprint, vitality=5, **kwargs): Builds and projects a declarative tree.
	FromXml(source, vitality=5, **kwargs): Same, from an XML document.
	Lookup(parent, name): RETURNS the attributes of a child, plus the 'ttl' they may be cached for.
	GetAttributes(id): RETURNS the attributes of an inode.
	Read(id, offset, size): RETURNS freshly rendered bytes.
	ReadDirectory(id, cursor=0): RETURNS DirectoryEntry tuples after *cursor*.
	Write(id, data): Pets a kitty. RETURNS the bytes written.
	Resolve(path): RETURNS the inode reached by looking up each component of *path* from the root.

TODOs/FIXMEs:
None.
"""

import stat
import logging
import threading

from .fs.common.Inode import InodeKind
from .fs.common.Errors import NotFound
from .fs.File import DEFAULT_VITALITY
from .InodeTable import InodeTable
from .StateEngine import StateEngine
from .Pagination import ListDirectory
from .TreeBuilder import TreeBuilder, DEFAULT_JOURNAL
from .Templates import DEFAULT_GREETING
from .Utils import split_upath

CREATE_TIME = 1381237736 # 2013-10-08 08:56
DEFAULT_TTL = 1.0 # seconds

DIR_MODE = stat.S_IFDIR | 0o755
FILE_MODE = stat.S_IFREG | 0o644


# KittyFS is all the filesystem state that outlives a single call.
# NOTE: After construction only the File counters change, and only through Write.
class KittyFS(object):
	def __init__(this, tree, journal=DEFAULT_JOURNAL, greeting=DEFAULT_GREETING, ttl=DEFAULT_TTL):
		this.table = InodeTable.Project(tree)
		this.state = StateEngine(this.table, journal=journal, greeting=greeting)
		this.ttl = ttl

		# One lock for everything; fuse may call in from several threads.
		this.lock = threading.RLock()

		this.rootId = this.table.root

	@classmethod
	def FromBlueprint(cls, blueprint, vitality=DEFAULT_VITALITY, **kwargs):
		return cls(TreeBuilder(vitality).Build(blueprint), **kwargs)

	@classmethod
	def FromXml(cls, source, vitality=DEFAULT_VITALITY, **kwargs):
		return cls.FromBlueprint(TreeBuilder.FromXml(source), vitality, **kwargs)

	# Attributes are a plain dict, in the shape the FUSE adapter copies into a fuse.Stat.
	# File sizes are rendered on the spot; there is no cached size to go stale.
	def AttributesOf(this, node):
		if (node.kind is InodeKind.DIRECTORY):
			return {
				'ino': node.id,
				'type': str(node.kind),
				'mode': DIR_MODE,
				'nlink': 2,
				'size': 0,
				'mtime': CREATE_TIME,
				'ctime': CREATE_TIME,
				'atime': CREATE_TIME,
			}
		return {
			'ino': node.id,
			'type': str(node.kind),
			'mode': FILE_MODE,
			'nlink': 1,
			'size': this.state.Size(node),
			'mtime': CREATE_TIME,
			'ctime': CREATE_TIME,
			'atime': CREATE_TIME,
		}

	# RETURNS the attributes of the child of *parent* named *name*.
	# The entry carries the ttl, in seconds, for which the transport may cache it.
	def Lookup(this, parent, name):
		with this.lock:
			this.table.Require(parent, InodeKind.DIRECTORY)
			child = this.table.ChildNamed(parent, name)
			if (child is None):
				raise NotFound(f"no {name!r} in inode {parent}")
			ret = this.AttributesOf(child)
			ret['ttl'] = this.ttl
			return ret

	def GetAttributes(this, id):
		with this.lock:
			return this.AttributesOf(this.table.Require(id))

	def Read(this, id, offset, size):
		with this.lock:
			file = this.table.Require(id, InodeKind.FILE)
			return this.state.Slice(file, offset, size)

	def ReadDirectory(this, id, cursor=0):
		with this.lock:
			return ListDirectory(this.table, id, cursor)

	def Write(this, id, data):
		with this.lock:
			file = this.table.Require(id, InodeKind.FILE)
			return this.state.Pet(file, data)

	# Walk *path* one Lookup at a time, starting at the root.
	def Resolve(this, path):
		with this.lock:
			id = this.rootId
			for segment in split_upath(path):
				id = this.Lookup(id, segment)['ino']
			return id

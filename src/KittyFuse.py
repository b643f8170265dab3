import os
import stat
import errno

import fuse

from libkittyfs import InodeKind

from .FuseMethod import *

fuse.fuse_python_api = (0, 2)


def DirentryType(kind):
	if (kind is InodeKind.DIRECTORY):
		return stat.S_IFDIR >> 12
	return stat.S_IFREG >> 12


# KittyFuse mounts a KittyFS engine through fuse-python.
# fuse-python hands us paths; every callback resolves its path to an inode and then works purely on inodes.
class KittyFuse(fuse.Fuse):
	def __init__(this, engine, *args, **kwargs):
		super(KittyFuse, this).__init__(*args, **kwargs)

		this.engine = engine
		this.uid = os.getuid()
		this.gid = os.getgid()

	def MakeStat(this, info):
		st = fuse.Stat()
		st.st_ino = info['ino']
		st.st_mode = info['mode']
		st.st_nlink = info['nlink']
		st.st_size = info['size']
		st.st_uid = this.uid
		st.st_gid = this.gid
		st.st_atime = info['atime']
		st.st_mtime = info['mtime']
		st.st_ctime = info['ctime']
		return st

	# -- Directory handle ops

	@FuseMethod
	def readdir(this, path, offset):
		id = this.engine.Resolve(path)

		# Each entry's offset is its own index: the cursor to resume after it.
		return [
			fuse.Direntry(
				entry.name,
				ino=entry.id,
				type=DirentryType(entry.kind),
				offset=entry.index
			)
			for entry in this.engine.ReadDirectory(id, offset)
		]

	# -- File ops

	@FuseMethod
	def open(this, path, flags):
		info = this.engine.GetAttributes(this.engine.Resolve(path))
		if info['type'] != str(InodeKind.FILE):
			return -errno.EISDIR
		return 0

	@FuseMethod
	def read(this, path, size, offset):
		return this.engine.Read(this.engine.Resolve(path), offset, size)

	@FuseMethod
	def write(this, path, buf, offset):
		# Kitties only care about what was written, not where.
		return this.engine.Write(this.engine.Resolve(path), buf)

	# `echo pets > kitty` truncates first; there is nothing to truncate, so just say yes.
	@FuseMethod
	def truncate(this, path, size):
		this.engine.Read(this.engine.Resolve(path), 0, 0)
		return 0

	@FuseMethod
	def flush(this, path):
		return 0

	@FuseMethod
	def release(this, path, flags):
		return 0

	# -- Handleless ops

	@FuseMethod
	def getattr(this, path):
		return this.MakeStat(this.engine.GetAttributes(this.engine.Resolve(path)))

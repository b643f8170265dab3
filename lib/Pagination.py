"""
lib/Pagination.py

Purpose:
Lists a directory in a fixed order that can be resumed part way through.

Place in Architecture:
Serves KittyFS.ReadDirectory, which the FUSE adapter calls for readdir.
The order is always '.', '..', then the children in the order they were built. Each entry's index doubles as the cursor a caller hands back to continue after it.

Interface:

	DirectoryEntry: index, name, id and kind of one listed entry.
	Entries(table, id): RETURNS every entry of a directory, in order.
	ListDirectory(table, id, cursor=0): RETURNS the entries after *cursor*.

TODOs/FIXMEs:
None.
"""

from collections import namedtuple

from .fs.common.Inode import InodeKind

DirectoryEntry = namedtuple('DirectoryEntry', ['index', 'name', 'id', 'kind'])


# Only the directory itself, its parent and its own children are touched, never the rest of the tree.
def Entries(table, id):
	directory = table.Require(id, InodeKind.DIRECTORY)
	parent = directory.id if directory.IsRoot() else directory.parent

	ret = [
		DirectoryEntry(0, '.', directory.id, InodeKind.DIRECTORY),
		DirectoryEntry(1, '..', parent, InodeKind.DIRECTORY),
	]
	for child_id in table.ChildrenOf(directory.id):
		child = table.Get(child_id)
		ret.append(DirectoryEntry(len(ret), child.name, child.id, child.kind))
	return ret


# A cursor of 0 starts from the top. Any other cursor is the index of the last entry already seen, so listing resumes just after it.
def ListDirectory(table, id, cursor=0):
	entries = Entries(table, id)
	cursor = int(cursor)
	if (cursor <= 0):
		return entries
	return entries[cursor + 1:]

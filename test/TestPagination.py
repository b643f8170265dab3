from StandardTestFixture import StandardTestFixture

from libkittyfs import TreeBuilder, Dir, Kitty, InodeTable, InodeKind, ListDirectory, NotFound
from libkittyfs.Pagination import Entries


class TestPagination(StandardTestFixture):

	def build(this):
		return InodeTable.Project(TreeBuilder().Build(
			Dir("root",
				Kitty("b.kitty"),
				Dir("attic",
					Kitty("c.kitty"),
				),
				Kitty("a.kitty"),
				Dir("empty"),
			)
		))

	def test_dot_entries_come_first(this):
		table = this.build()
		entries = ListDirectory(table, 3)
		this.assert_equal([(e.index, e.name, e.id) for e in entries], [
			(0, '.', 3),
			(1, '..', 1),
			(2, 'c.kitty', 4),
		])

	def test_root_parent_is_itself(this):
		entries = ListDirectory(this.build(), 1)
		this.assert_equal(entries[1].id, 1)

	def test_children_keep_build_order(this):
		entries = ListDirectory(this.build(), 1)
		this.assert_equal([e.name for e in entries], ['.', '..', 'b.kitty', 'attic', 'a.kitty', 'empty'])
		this.assert_equal([e.kind for e in entries[2:]], [InodeKind.FILE, InodeKind.DIRECTORY, InodeKind.FILE, InodeKind.DIRECTORY])

	def test_cursor_resumes_after_the_last_entry_seen(this):
		table = this.build()
		this.assert_equal([e.name for e in ListDirectory(table, 1, 2)], ['attic', 'a.kitty', 'empty'])
		this.assert_equal([e.name for e in ListDirectory(table, 1, 5)], [])
		this.assert_equal([e.name for e in ListDirectory(table, 1, 50)], [])

	def test_paging_yields_every_entry_once(this):
		table = this.build()
		for directory in table.by_parent:
			full = Entries(table, directory)

			seen = []
			page = ListDirectory(table, directory, 0)[:2]
			while page:
				seen.extend(page)
				page = ListDirectory(table, directory, seen[-1].index)[:2]

			this.assert_equal(seen, full)

	def test_empty_directory(this):
		entries = ListDirectory(this.build(), 6)
		this.assert_equal([e.name for e in entries], ['.', '..'])

	def test_only_directories_list(this):
		table = this.build()
		this.assert_raises(NotFound, ListDirectory, table, 2)
		this.assert_raises(NotFound, ListDirectory, table, 99)

import stat
import threading

from StandardTestFixture import StandardTestFixture

from libkittyfs import KittyFS, NotFound, InvariantViolation

MAX = 1 << 20


class TestKittyFS(StandardTestFixture):

	def read_text(this, engine, id):
		return engine.Read(id, 0, MAX).decode('utf-8')

	def test_lookup(this):
		engine = this.make_engine()
		info = engine.Lookup(1, "cat.kitty")
		this.assert_equal(info['ino'], 3)
		this.assert_equal(info['type'], 'file')
		this.assert_equal(engine.Lookup(4, "kitten.kitty")['ino'], 5)
		this.assert_equal(info['ttl'], 1.0)
		assert 'ttl' not in engine.GetAttributes(3)

	def test_lookup_failures(this):
		engine = this.make_engine()
		this.assert_raises(NotFound, engine.Lookup, 1, "dog.kitty")
		this.assert_raises(NotFound, engine.Lookup, 3, "anything")
		this.assert_raises(NotFound, engine.Lookup, 42, "cat.kitty")

	def test_directory_attributes(this):
		info = this.make_engine().GetAttributes(1)
		this.assert_equal(info['type'], 'dir')
		this.assert_equal(info['size'], 0)
		assert stat.S_ISDIR(info['mode'])
		this.assert_equal(info['mtime'], 1381237736)

	def test_file_attributes(this):
		engine = this.make_engine()
		info = engine.GetAttributes(3)
		assert stat.S_ISREG(info['mode'])
		this.assert_equal(stat.S_IMODE(info['mode']), 0o644)
		this.assert_equal(info['size'], len(engine.Read(3, 0, MAX)))

	def test_unknown_inode(this):
		engine = this.make_engine()
		this.assert_raises(NotFound, engine.GetAttributes, 99)
		this.assert_raises(NotFound, engine.Read, 99, 0, 10)
		this.assert_raises(NotFound, engine.ReadDirectory, 99)
		this.assert_raises(NotFound, engine.Write, 99, b"pets")

	def test_wrong_kind(this):
		engine = this.make_engine()
		this.assert_raises(NotFound, engine.Read, 1, 0, 10)
		this.assert_raises(NotFound, engine.Write, 4, b"pets")
		this.assert_raises(NotFound, engine.ReadDirectory, 3)

	def test_read_past_the_end_is_empty(this):
		engine = this.make_engine()
		size = engine.GetAttributes(3)['size']
		this.assert_equal(engine.Read(3, size, 100), b"")
		this.assert_equal(engine.Read(3, size * 2, 100), b"")
		this.assert_equal(engine.Read(3, size - 1, 100), engine.Read(3, 0, MAX)[-1:])

	def test_kitty_lifecycle(this):
		engine = this.make_engine()
		assert "Please send me 5 pets" in this.read_text(engine, 3)

		this.assert_equal(engine.Write(3, b"pets"), 4)
		assert "Please send me 4 pets" in this.read_text(engine, 3)

		for i in range(4):
			engine.Write(3, b"pets\n")
		assert "WOW! YOU GAVE ME ENOUGH PETS!!" in this.read_text(engine, 3)

		engine.Write(3, b"pets")
		assert "NO MORE PETS" in this.read_text(engine, 3)

		this.assert_raises(NotFound, engine.Write, 3, b"pets")
		assert "NO MORE PETS" in this.read_text(engine, 3)

	def test_exactly_n_plus_one_pets_are_accepted(this):
		engine = this.make_engine(vitality=5)
		accepted = 0
		while True:
			try:
				engine.Write(5, b"pets")
				accepted += 1
			except NotFound:
				break
		this.assert_equal(accepted, 6)
		before = engine.Read(5, 0, MAX)
		this.assert_raises(NotFound, engine.Write, 5, b"pets")
		this.assert_equal(engine.Read(5, 0, MAX), before)

	def test_size_tracks_content(this):
		engine = this.make_engine(vitality=1)
		for id in (2, 3, 5):
			this.assert_equal(engine.GetAttributes(id)['size'], len(engine.Read(id, 0, MAX)))
		engine.Write(3, b"pets")
		engine.Write(5, b"pets")
		engine.Write(5, b"pets")
		for id in (2, 3, 5):
			this.assert_equal(engine.GetAttributes(id)['size'], len(engine.Read(id, 0, MAX)))

	def test_journal_tallies_the_other_kitties(this):
		engine = this.make_engine()
		for i in range(5):
			engine.Write(5, b"pets")

		text = this.read_text(engine, 2)
		assert "* 1 kitties still need pets" in text
		assert "* 1 kitties are at peace with the world" in text
		assert "* 0 kitties are mad because I petted them too much!" in text
		this.assert_equal(engine.GetAttributes(2)['size'], len(text.encode('utf-8')))

	def test_read_directory(this):
		engine = this.make_engine()
		this.assert_equal([e.name for e in engine.ReadDirectory(1)], ['.', '..', 'journal.txt', 'cat.kitty', 'box'])
		this.assert_equal([e.name for e in engine.ReadDirectory(1, 3)], ['box'])

	def test_resolve(this):
		engine = this.make_engine()
		this.assert_equal(engine.Resolve("/"), 1)
		this.assert_equal(engine.Resolve(""), 1)
		this.assert_equal(engine.Resolve("/box/kitten.kitty"), 5)
		this.assert_equal(engine.Resolve("box//./kitten.kitty"), 5)
		this.assert_raises(NotFound, engine.Resolve, "/box/missing")
		this.assert_raises(NotFound, engine.Resolve, "/cat.kitty/inside")

	def test_greeting_and_ttl(this):
		engine = this.make_engine(greeting="Hello Kitty!", ttl=2.0)
		assert this.read_text(engine, 3).startswith("Hello Kitty!\n")
		this.assert_equal(engine.ttl, 2.0)
		this.assert_equal(engine.Lookup(4, "kitten.kitty")['ttl'], 2.0)

	def test_from_xml(this):
		engine = KittyFS.FromXml("<home><diary.txt>x</diary.txt><tom>Tom</tom></home>", vitality=2, journal="diary.txt")
		this.assert_equal(engine.Resolve("/tom"), 3)
		assert "Please send me 2 pets" in this.read_text(engine, 3)
		assert this.read_text(engine, 2).startswith("Dear Diary,")

	def test_from_broken_xml(this):
		this.assert_raises(InvariantViolation, KittyFS.FromXml, "<home>")

	def test_concurrent_writes_never_overshoot(this):
		engine = this.make_engine(vitality=50)
		results = []

		def pet():
			for i in range(20):
				try:
					results.append(engine.Write(3, b"pets"))
				except NotFound:
					results.append(None)

		threads = [threading.Thread(target=pet) for i in range(5)]
		for thread in threads:
			thread.start()
		for thread in threads:
			thread.join()

		this.assert_equal(len([r for r in results if r is not None]), 51)
		this.assert_equal(engine.table.Get(3).vitality, -1)

"""
lib/TreeBuilder.py

Purpose:
Turns a declarative description of a tree into Directory and File nodes, assigning every node a unique inode number.

Place in Architecture:
Runs once, at startup, before the InodeTable is projected. Two inputs are supported: a literal tree written with Dir() and Kitty(), or an XML document whose elements become directories and files.

Interface:

	Dir(name, *children) / Kitty(name, template=None, vitality=None): blueprint constructors.
	TreeBuilder(vitality=5).Build(blueprint): RETURNS a Tree.
	TreeBuilder.FromXml(source): RETURNS a blueprint read from an XML file path or string.
	DefaultTree(journal): the blueprint mounted when no XML document is given.
	Tree(root, nodes): the built node graph.

TODOs/FIXMEs:
None.
"""

import os
import logging
import xml.etree.ElementTree as ElementTree

from .fs.Directory import Directory
from .fs.File import File, DEFAULT_VITALITY
from .fs.common.Errors import InvariantViolation

ROOT_INODE = 1
DEFAULT_JOURNAL = "LiveJournal.txt"


class Dir(object):
	def __init__(this, name, *children):
		this.name = name
		this.children = list(children)

	def __repr__(this):
		return f"Dir({this.name!r}, {len(this.children)} children)"


# A Kitty is a File blueprint. When no template is given, the kitty's own name is used.
class Kitty(object):
	def __init__(this, name, template=None, vitality=None):
		this.name = name
		this.template = template if template is not None else name
		this.vitality = vitality

	def __repr__(this):
		return f"Kitty({this.name!r})"


# The result of a build: the root's inode and every node, in the order inodes were assigned.
class Tree(object):
	def __init__(this, root, nodes):
		this.root = root
		this.nodes = list(nodes)

		# A node without a parent anywhere but the root means the builder skipped some wiring.
		for node in this.nodes:
			if (node.id != root and node.parent is None):
				raise InvariantViolation(f"{node!r} has no parent")

	def __len__(this):
		return len(this.nodes)

	def __iter__(this):
		return iter(this.nodes)


class TreeBuilder(object):
	def __init__(this, vitality=DEFAULT_VITALITY):
		this.vitality = vitality
		this.next_inode = ROOT_INODE

	def NextInode(this):
		ret = this.next_inode
		this.next_inode += 1
		return ret

	# Build a Tree from a blueprint. Inodes are handed out depth first, parents before their children.
	def Build(this, blueprint):
		if (not isinstance(blueprint, Dir)):
			raise InvariantViolation(f"The root of a tree must be a directory, not {blueprint!r}")

		this.next_inode = ROOT_INODE
		nodes = []
		root = this.BuildNode(blueprint, nodes)
		tree = Tree(root.id, nodes)
		logging.info(f"Built tree '{root.name}' with {len(tree)} inodes")
		return tree

	def BuildNode(this, blueprint, nodes):
		if (isinstance(blueprint, Dir)):
			node = Directory(this.NextInode(), blueprint.name)
			nodes.append(node)
			for child in blueprint.children:
				node.AddChild(this.BuildNode(child, nodes))
			return node

		if (isinstance(blueprint, Kitty)):
			vitality = blueprint.vitality if blueprint.vitality is not None else this.vitality
			node = File(this.NextInode(), blueprint.name, blueprint.template, vitality)
			nodes.append(node)
			return node

		raise InvariantViolation(f"Don't know how to build {blueprint!r}")

	# Read a blueprint from XML.
	# The document element is the root directory. Elements that open with text become kitties holding that text; all other elements become directories.
	# *source* may be a path to a file or the XML itself.
	@staticmethod
	def FromXml(source):
		try:
			if (os.path.isfile(source)):
				element = ElementTree.parse(source).getroot()
			else:
				element = ElementTree.fromstring(source)
		except ElementTree.ParseError as e:
			raise InvariantViolation(f"Could not parse XML tree: {e}") from e

		root = TreeBuilder.BlueprintFromElement(element)
		if (isinstance(root, Kitty)):
			root = Dir(root.name)
		return root

	@staticmethod
	def BlueprintFromElement(element):
		name = TagName(element)
		text = (element.text or "").strip()
		if (text):
			return Kitty(name, text)
		return Dir(name, *[TreeBuilder.BlueprintFromElement(child) for child in element])


# Drop any {namespace} prefix ElementTree puts on tags.
def TagName(element):
	return element.tag.rsplit('}', 1)[-1]


def DefaultTree(journal=DEFAULT_JOURNAL):
	return Dir("kitties",
		Kitty(journal),
		Kitty("mittens.txt", "Mittens"),
		Dir("living_room",
			Kitty("tom.txt", "Tom"),
			Kitty("felix.txt", "Felix"),
			Dir("under_the_couch",
				Kitty("shadow.txt", "Shadow"),
			),
		),
		Dir("garden",
			Kitty("garfield.txt", "Garfield"),
		),
	)

from .fs.common.Errors import NotFound, InvariantViolation
from .fs.common.Inode import Inode, InodeKind
from .fs.common.Vitality import Vitality
from .fs.Directory import Directory
from .fs.File import File
from .TreeBuilder import TreeBuilder, Tree, Dir, Kitty, DefaultTree
from .InodeTable import InodeTable
from .StateEngine import StateEngine
from .Pagination import DirectoryEntry, ListDirectory
from .KittyFS import KittyFS

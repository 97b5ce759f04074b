from interactive.chooser.alphabet import KNOWN_KEYS, Alphabet
from interactive.chooser.tree import LabelNode, LabelTree, build, label_depth, partition
from interactive.chooser.session import AwaitingInput, Cancelled, SelectionSession, Selected
from interactive.chooser.reaper import Reaper
from interactive.chooser.overlays import OverlayBase
from sink.errors import ConfigError, InvalidStateError

from dataclasses import dataclass

@dataclass
class TreeConfig:
    max_depth: int = 4            # deepest move count still expanded (tree holds max_depth + 1 moves)
    win_check_from: int = 4       # below 4 moves nobody can have won
    show_progress: bool = False
    verbose: bool = True

@dataclass
class EndgameConfig:
    include_swapped: bool = False  # also emit the O-winning half
    show_progress: bool = False

@dataclass
class DisplayConfig:
    max_boards: int = 20           # boards printed by `main.py endgames`
    max_tree_lines: int = 200
    
@dataclass
class Config:
    tree: TreeConfig = None
    endgame: EndgameConfig = None
    display: DisplayConfig = None
    
    def __post_init__(self):
        if self.tree is None:
            self.tree = TreeConfig()
        if self.endgame is None:
            self.endgame = EndgameConfig()
        if self.display is None:
            self.display = DisplayConfig()

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class OpConfig:
    """per-operator behaviour switches"""
    infer_element_type: bool = True  # derive T from homogeneous data when not given
    insertion_cutoff: int = 12       # ranges this short are insertion sorted
    stable_block_size: int = 20      # initial run length for stable_sort

    def __post_init__(self):
        if self.insertion_cutoff < 1:
            raise ValueError("insertion_cutoff must be positive")
        if self.stable_block_size < 1:
            raise ValueError("stable_block_size must be positive")

    def with_(self, **changes) -> 'OpConfig':
        """copy of this config with some fields changed"""
        return replace(self, **changes)


DEFAULT_CONFIG = OpConfig()

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator

import numpy as np

from svm_engine.components.interfaces import Splitter
from svm_engine.components.splitters.cv_split import generate_contiguous_folds
from svm_engine.components.splitters.types import Split


@dataclass
class ContiguousKFoldSplitter(Splitter):
    n_splits: int

    def split(self, X: np.ndarray, y: np.ndarray) -> Iterator[Split]:
        yield from generate_contiguous_folds(X, y, n_splits=self.n_splits)

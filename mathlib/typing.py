from typing import Literal, Sequence, Union
from torch import Tensor

ScalarLike = Union[int, float]
ArrayLike = Union[Sequence[ScalarLike], Sequence[Sequence[ScalarLike]], Tensor]
MultMode = Literal['standard', 'legacy']

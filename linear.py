from typing import Self
from typing import Any, Iterator
from dataclasses import dataclass

from scalars import format_number, real_value

__all__ = [
	'Vector',
]


# VECTOR
# ------

@dataclass(frozen=True)
class Vector:
	'''
	vector of arbitrary (positive) dimension, either a row or a column vector.

	vectors only add to vectors of the same dimension and orientation;
	anything else raises ValueError.
	'''

	data: tuple[float, ...]
	row: bool = False
	''' whether this is a row vector (otherwise a column vector) '''

	def __post_init__(self):
		values = []
		for x in self.data:
			value = real_value(x)
			if value is None:
				raise TypeError(f'vector components must be real numbers, not {type(x)}')
			values.append(value)
		if not values:
			raise ValueError('vector dimension must be positive')
		object.__setattr__(self, 'data', tuple(values))
		object.__setattr__(self, 'row', bool(self.row))

	@classmethod
	def of(cls, *data: float, row: bool = False) -> Self:
		return cls(data, row)

	@classmethod
	def zeros(cls, dimension: int, row: bool = False) -> Self:
		if not isinstance(dimension, int):
			raise TypeError(f'dimension must be an int, not {type(dimension)}')
		if dimension <= 0:
			raise ValueError(f'vector dimension must be positive, not {dimension}')
		return cls((0.0,) * dimension, row)

	@property
	def dimension(self) -> int:
		return len(self.data)

	def __str__(self):
		body = '[' + ' '.join(map(format_number, self.data)) + ']'
		return body if self.row else body + 'ᵀ'

	# pass sequence protocol to underlying tuple

	def __len__(self) -> int:
		return len(self.data)

	def __getitem__(self, index: int) -> float:
		return self.data[index]

	def __iter__(self) -> Iterator[float]:
		return iter(self.data)

	# operations

	def negate(self) -> Self:
		''' vector with every component negated, same as `-self` '''
		return type(self)(tuple(-x for x in self.data), self.row)

	def invert(self) -> Self:
		''' same components with the orientation flipped (row <-> column) '''
		return type(self)(self.data, not self.row)

	def __pos__(self) -> Self:
		return self

	def __neg__(self) -> Self:
		return self.negate()

	def _check_compatible(self, other: 'Vector'):
		if self.row != other.row:
			raise ValueError('cannot combine a row vector with a column vector')
		if self.dimension != other.dimension:
			raise ValueError(f'cannot combine vectors of dimension {self.dimension} and {other.dimension}')

	def __add__(self, other: Any) -> Self:
		if not isinstance(other, Vector):
			return NotImplemented
		self._check_compatible(other)
		return type(self)(tuple(a + b for a, b in zip(self.data, other.data)), self.row)

	def __sub__(self, other: Any) -> Self:
		if not isinstance(other, Vector):
			return NotImplemented
		self._check_compatible(other)
		return type(self)(tuple(a - b for a, b in zip(self.data, other.data)), self.row)

	def __mul__(self, other: Any) -> Self:
		''' scaling by a real number '''
		k = real_value(other)
		if k is None:
			return NotImplemented
		return type(self)(tuple(k * x for x in self.data), self.row)

	__rmul__ = __mul__

from typing import Self
from typing import Optional, ClassVar, Any
from dataclasses import dataclass
import functools
import math
import numbers

__all__ = [
	'Real',
	'Complex',
	'Imaginary',
	'format_number',
	'real_value',
]

def format_number(x: float) -> str:
	''' formats integral floats without the trailing `.0` '''
	if x.is_integer():
		return str(int(x))
	return repr(x)

def real_value(x: Any) -> Optional[float]:
	''' float value of `x` if it's a real number (`Real` included), else None '''
	if isinstance(x, Real):
		return x.num
	if isinstance(x, numbers.Real):
		return float(x)
	return None

def _check_real(name: str, x: Any) -> float:
	value = real_value(x)
	if value is None:
		raise TypeError(f'{name} must be a real number, not {type(x)}')
	return value


# REAL
# ----

@functools.total_ordering
@dataclass(frozen=True)
class Real:
	'''
	thin wrapper over a float.

	it interoperates with plain Python numbers on either side of an operator;
	use `float()` / `Real()` to convert explicitly.
	'''

	num: float

	def __post_init__(self):
		object.__setattr__(self, 'num', _check_real('num', self.num))

	def __str__(self):
		return str(self.num)

	def __float__(self) -> float:
		return self.num

	def __int__(self) -> int:
		return int(self.num)

	# comparison / hashing

	def __eq__(self, other: object):
		value = real_value(other)
		if value is None:
			return NotImplemented
		return self.num == value

	def __lt__(self, other: object):
		value = real_value(other)
		if value is None:
			return NotImplemented
		return self.num < value

	def __hash__(self):
		return hash(self.num)

	# arithmetic

	def __pos__(self) -> Self:
		return self

	def __neg__(self) -> Self:
		return type(self)(-self.num)

	def __add__(self, other: Any) -> Self:
		value = real_value(other)
		if value is None:
			return NotImplemented
		return type(self)(self.num + value)

	__radd__ = __add__

	def __sub__(self, other: Any) -> Self:
		value = real_value(other)
		if value is None:
			return NotImplemented
		return type(self)(self.num - value)

	def __rsub__(self, other: Any) -> Self:
		value = real_value(other)
		if value is None:
			return NotImplemented
		return type(self)(value - self.num)

	def __mul__(self, other: Any) -> Self:
		value = real_value(other)
		if value is None:
			return NotImplemented
		return type(self)(self.num * value)

	__rmul__ = __mul__

	def __truediv__(self, other: Any) -> Self:
		value = real_value(other)
		if value is None:
			return NotImplemented
		return type(self)(self.num / value)

	def __rtruediv__(self, other: Any) -> Self:
		value = real_value(other)
		if value is None:
			return NotImplemented
		return type(self)(value / self.num)


# COMPLEX
# -------

@dataclass(frozen=True)
class Complex:
	''' complex number `x + yi`. real numbers are accepted as operands on either side. '''

	x: float
	''' real part '''
	y: float = 0.0
	''' imaginary part '''

	I: ClassVar['Complex']
	''' the imaginary unit '''

	def __post_init__(self):
		object.__setattr__(self, 'x', _check_real('x', self.x))
		object.__setattr__(self, 'y', _check_real('y', self.y))

	def _coerce(self, other: Any) -> Optional['Complex']:
		if isinstance(other, Complex):
			return other
		value = real_value(other)
		if value is None:
			return None
		return Complex(value)

	@property
	def normal(self) -> float:
		''' modulus (length) of the number '''
		return math.hypot(self.x, self.y)

	def length(self) -> float:
		return self.normal

	def conjugate(self) -> Self:
		return type(self)(self.x, -self.y)

	def __complex__(self) -> complex:
		return complex(self.x, self.y)

	def __str__(self):
		if self.y < 0:
			return f'{format_number(self.x)}-{format_number(-self.y)}i'
		return f'{format_number(self.x)}+{format_number(self.y)}i'

	# comparison / hashing

	def __eq__(self, other: object):
		o = self._coerce(other)
		if o is None:
			return NotImplemented
		return (self.x, self.y) == (o.x, o.y)

	def __hash__(self):
		# consistent with the hash of equal Python numbers
		return hash(complex(self.x, self.y))

	# arithmetic

	def __pos__(self) -> Self:
		return self

	def __neg__(self) -> Self:
		return type(self)(-self.x, -self.y)

	def __add__(self, other: Any) -> Self:
		o = self._coerce(other)
		if o is None:
			return NotImplemented
		return type(self)(self.x + o.x, self.y + o.y)

	__radd__ = __add__

	def __sub__(self, other: Any) -> Self:
		o = self._coerce(other)
		if o is None:
			return NotImplemented
		return type(self)(self.x - o.x, self.y - o.y)

	def __rsub__(self, other: Any) -> Self:
		o = self._coerce(other)
		if o is None:
			return NotImplemented
		return type(self)(o.x - self.x, o.y - self.y)

	def __mul__(self, other: Any) -> Self:
		o = self._coerce(other)
		if o is None:
			return NotImplemented
		return type(self)(self.x * o.x - self.y * o.y, self.y * o.x + self.x * o.y)

	__rmul__ = __mul__

	def _divide(self, a: 'Complex', b: 'Complex') -> Self:
		if b.x == 0 and b.y == 0:
			raise ZeroDivisionError('complex division by zero')
		m = b.x ** 2 + b.y ** 2
		return type(self)((a.x * b.x + a.y * b.y) / m, (a.y * b.x - a.x * b.y) / m)

	def __truediv__(self, other: Any) -> Self:
		o = self._coerce(other)
		if o is None:
			return NotImplemented
		return self._divide(self, o)

	def __rtruediv__(self, other: Any) -> Self:
		o = self._coerce(other)
		if o is None:
			return NotImplemented
		return self._divide(o, self)

Complex.I = Complex(0.0, 1.0)

class Imaginary(Complex):
	'''
	same as `Complex`, kept as its own type: arithmetic where the left (or only)
	operand is an `Imaginary` produces an `Imaginary`.
	'''

Imaginary.I = Imaginary(0.0, 1.0)

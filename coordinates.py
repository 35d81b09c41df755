from typing import Self
from typing import ClassVar, Any, Sequence
from dataclasses import dataclass
import math

from scalars import format_number, real_value

__all__ = [
	'Point3',
	'Vector3',
	'Cylindrical3',
]

def _check_coordinates(obj: Any, *names: str):
	''' coerces the named fields of a frozen dataclass to float '''
	for name in names:
		value = real_value(getattr(obj, name))
		if value is None:
			raise TypeError(f'{name} must be a real number, not {type(getattr(obj, name))}')
		object.__setattr__(obj, name, value)

def _unpack3(values: Sequence[float]) -> tuple[float, float, float]:
	if len(values) != 3:
		raise ValueError(f'expected 3 coordinates, got {len(values)}')
	x, y, z = values
	return x, y, z


# POINT
# -----

@dataclass(frozen=True)
class Point3:
	''' point in 3D euclidean space, in rectangular coordinates '''

	x: float
	y: float
	z: float

	def __post_init__(self):
		_check_coordinates(self, 'x', 'y', 'z')

	@classmethod
	def from_sequence(cls, values: Sequence[float]) -> Self:
		return cls(*_unpack3(values))

	@classmethod
	def from_vector(cls, v: 'Vector3') -> Self:
		''' the point a position vector points to '''
		return cls(v.x, v.y, v.z)

	def to_vector(self) -> 'Vector3':
		''' position vector of this point '''
		return Vector3(self.x, self.y, self.z)

	def to_cylindrical(self) -> 'Cylindrical3':
		return Cylindrical3.from_point(self)

	def distance_from(self, other: 'Point3') -> float:
		return math.dist((self.x, self.y, self.z), (other.x, other.y, other.z))

	@staticmethod
	def distance(a: 'Point3', b: 'Point3') -> float:
		return a.distance_from(b)

	def __str__(self):
		return 'Rect(' + ', '.join(map(format_number, (self.x, self.y, self.z))) + ')'


# VECTOR
# ------

@dataclass(frozen=True)
class Vector3:
	''' 3D vector, in rectangular coordinates '''

	x: float
	y: float
	z: float

	ZERO: ClassVar['Vector3']
	I: ClassVar['Vector3']
	J: ClassVar['Vector3']
	K: ClassVar['Vector3']

	def __post_init__(self):
		_check_coordinates(self, 'x', 'y', 'z')

	@classmethod
	def from_sequence(cls, values: Sequence[float]) -> Self:
		return cls(*_unpack3(values))

	@classmethod
	def from_point(cls, p: Point3) -> Self:
		return cls(p.x, p.y, p.z)

	@property
	def length(self) -> float:
		return math.hypot(self.x, self.y, self.z)

	@property
	def end_point(self) -> Point3:
		''' the point this vector reaches when placed at the origin '''
		return Point3(self.x, self.y, self.z)

	def __str__(self):
		return '<' + ', '.join(map(format_number, (self.x, self.y, self.z))) + '>'

	# arithmetic

	def __pos__(self) -> Self:
		return self

	def __neg__(self) -> Self:
		return type(self)(-self.x, -self.y, -self.z)

	def __add__(self, other: Any) -> Self:
		if not isinstance(other, Vector3):
			return NotImplemented
		return type(self)(self.x + other.x, self.y + other.y, self.z + other.z)

	def __sub__(self, other: Any) -> Self:
		if not isinstance(other, Vector3):
			return NotImplemented
		return type(self)(self.x - other.x, self.y - other.y, self.z - other.z)

	def __mul__(self, other: Any) -> Self:
		''' scaling by a real number '''
		k = real_value(other)
		if k is None:
			return NotImplemented
		return type(self)(k * self.x, k * self.y, k * self.z)

	__rmul__ = __mul__

	def dot(self, other: 'Vector3') -> float:
		return self.x * other.x + self.y * other.y + self.z * other.z

	def cross(self, other: 'Vector3') -> Self:
		return type(self)(
			self.y * other.z - self.z * other.y,
			self.z * other.x - self.x * other.z,
			self.x * other.y - self.y * other.x,
		)

	def angle_between(self, other: 'Vector3') -> float:
		''' angle in radians, in `[0, pi]`. raises ZeroDivisionError for a zero vector '''
		lengths = self.length * other.length
		if lengths == 0:
			raise ZeroDivisionError('angle with a zero vector is undefined')
		# rounding may push the cosine slightly out of [-1, 1]
		cosine = max(-1.0, min(1.0, self.dot(other) / lengths))
		return math.acos(cosine)

Vector3.ZERO = Vector3(0.0, 0.0, 0.0)
Vector3.I = Vector3(1.0, 0.0, 0.0)
Vector3.J = Vector3(0.0, 1.0, 0.0)
Vector3.K = Vector3(0.0, 0.0, 1.0)


# CYLINDRICAL
# -----------

@dataclass(frozen=True)
class Cylindrical3:
	''' point in 3D space, in cylindrical coordinates (radius, azimuth in radians, height) '''

	r: float
	theta: float
	z: float

	def __post_init__(self):
		_check_coordinates(self, 'r', 'theta', 'z')

	@classmethod
	def from_point(cls, p: Point3) -> Self:
		return cls(math.hypot(p.x, p.y), math.atan2(p.y, p.x), p.z)

	def to_point(self) -> Point3:
		''' equivalent point in rectangular coordinates '''
		return Point3(self.r * math.cos(self.theta), self.r * math.sin(self.theta), self.z)

	def __str__(self):
		return 'Cyl(' + ', '.join(map(format_number, (self.r, self.theta, self.z))) + ')'

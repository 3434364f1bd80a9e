from typing import Any, Callable, Optional

import click


class NumberList(click.ParamType):
	"""A comma-separated list of numbers, e.g. ``1,1,0.5``."""

	def __init__(self, cast: Callable[[str], Any], name: str) -> None:
		self.cast = cast
		self.name = name

	def convert(
		self,
		value: Any,
		param: Optional[click.Parameter],
		ctx: Optional[click.Context],
	) -> tuple:
		if isinstance(value, (list, tuple)):
			return tuple(value)
		items = [item.strip() for item in str(value).split(',')]
		try:
			return tuple(self.cast(item) for item in items if item)
		except ValueError:
			self.fail(
				f'{value!r} is not a comma-separated list of {self.name} values',
				param,
				ctx,
			)


INT_LIST = NumberList(int, 'integer')
FLOAT_LIST = NumberList(float, 'float')

# settings come from the environment, e.g.
#
# basic run (built-in sample puzzle):
# python3 -m tents_and_trees
#
# solve a puzzle file:
# PUZZLE=puzzle.txt python3 -m tents_and_trees
#
# random puzzle, reproducible with the seed printed on the first line:
# SEED=123 SIZE=8x8 python3 -m tents_and_trees

import os, re, random
from collections import namedtuple

from .errors import ConfigError

Settings = namedtuple('Settings', ['puzzle', 'size', 'density', 'seed', 'timeout', 'debug', 'pairing'])


def parse_size(size):
  m = re.fullmatch(r'(\d+)x(\d+)', size)
  if not m:
    raise ConfigError(f"SIZE must look like 8x8, not {size!r}")
  width, height = int(m.group(1)), int(m.group(2))
  if width < 3 or width > 100:
    raise ConfigError(f"WIDTH must be between 3 and 100, not {width}")
  if height < 3 or height > 100:
    raise ConfigError(f"HEIGHT must be between 3 and 100, not {height}")
  if width != height:
    raise ConfigError(f"SIZE must be square, not {width}x{height}")
  return width

def parse_number(environ, name, default, kind):
  raw = environ.get(name, '').strip()
  if not raw:
    return default
  try:
    return kind(raw)
  except ValueError:
    raise ConfigError(f"{name} must be a number, not {raw!r}") from None

def load_settings(environ=None):
  environ = os.environ if environ is None else environ

  puzzle = environ.get('PUZZLE', '').strip() or None
  size = environ.get('SIZE', '').strip()
  size = parse_size(size) if size else None

  density = parse_number(environ, 'DENSITY', 0.5, float)
  if density < 0.1 or density > 1.0:
    raise ConfigError(f"DENSITY must be between 0.1 and 1.0, not {density}")
  seed = parse_number(environ, 'SEED', None, int)
  if seed is None:
    seed = random.randint(0, 9999999)
  timeout = parse_number(environ, 'TIMEOUT', 100.0, float)
  if timeout <= 0:
    raise ConfigError(f"TIMEOUT must be positive, not {timeout}")

  debug = (parse_number(environ, 'DEBUG', 0, int) == 1)
  pairing = (parse_number(environ, 'PAIRING', 1, int) != 0)
  return Settings(puzzle, size, density, seed, timeout, debug, pairing)

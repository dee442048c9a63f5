# bidikit

Pure-Python building blocks for the Unicode Bidirectional Algorithm and
Arabic cursive joining. It needs nothing beyond the standard library.

## Install

```
pip install bidikit
```

## Modules

### `bidikit.types`

- `BidiType`: the bidi character types (`LTR`, `RTL`, `AL`, `EN`, `AN`, `ES`,
  `ET`, `CS`, `NSM`, `BN`, `BS`, `SS`, `WS`, `ON`, the explicit embeddings and
  overrides, `PDF`, the isolates `LRI`, `RLI`, `FSI`, `PDI`, and `SENTINEL`).
  `L`, `R`, `B` and `S` are aliases of `LTR`, `RTL`, `BS` and `SS`.
- `ParType`: paragraph directions `LTR`, `RTL`, `ON`, `WLTR` and `WRTL`.
- `Flags`: option flags such as `SHAPE_MIRRORING` and `REORDER_NSM`, plus the
  combinations `DEFAULT` and `ARABIC`.
- `bidi_type_of(ch)`: the bidi type of a character or code point. It uses
  the Unicode database that ships with Python's `unicodedata`. Characters with
  no recorded class count as `LTR`. A string that is not a single character,
  or a code point outside 0..0x10FFFF, raises `ValueError`.
- `is_explicit_or_bn`, `is_isolate` and `level_is_rtl`: queries on types and
  levels.
- `char_from_bidi_type`: a one-character debugging symbol for each type.
- Constants for the algorithm's limits (`BIDI_MAX_EXPLICIT_LEVEL` and others)
  and for the formatting characters (`CHAR_LRM`, `CHAR_RLE`, `CHAR_PDI` and
  others).

### `bidikit.joining_types`

- `JoiningMask`: the bit masks that joining properties are built from.
- `JoiningType`: the joining types `U`, `R`, `D`, `C`, `T`, `L` and `G`.
- `joining_type_name(value)`: the name of a joining type, or `"?"` if the
  value is not one.
- `classify_joining(prop)`: the joining class of a property, or `None`.
- Queries on a property: `joins_right`, `joins_left`, `arab_shapes`,
  `is_join_skipped`, `is_join_base_shapes` and `join_shape`.
- `joins_preceding_mask(level)` and `joins_following_mask(level)`: which side
  counts as "preceding" and "following" at a given embedding level.
- `char_from_joining_type(prop, visual)`: a debugging symbol for a property.

### `bidikit.joining`

- `join_arabic(bidi_types, embedding_levels, ar_props)`: applies the Arabic
  cursive joining rules and returns a new list of properties. Only the joining
  bits that actually connect to a neighbour are kept. Characters at different
  embedding levels do not join. Explicit marks and boundary neutrals are
  treated as matching any level. Transparent characters that lie between two
  joined letters get the joining bits of both sides. Sequences of different
  lengths raise `ValueError`.

### `bidikit.runs`

- `Run`: a stretch of text with a single bidi type, position, length, level
  and bracket type.
- `RunList`: a circular doubly linked list of runs around a sentinel node. It
  supports iteration and `len()`. `append(run)` adds a run at the end.
  `shadow(over, preserve_length)` overlays the runs of another list and
  empties that list. `validate()` raises `ValueError` if the links are broken.
- `encode_bidi_types(bidi_types, bracket_types=None)`: groups consecutive
  equal types into runs. A bracket or an isolate mark always gets a run of its
  own.

### `bidikit.marks`

- `remove_bidi_marks(text, positions_to_this=None, positions_from_this=None,
  embedding_levels=None)`: removes explicit embedding and override marks,
  isolates, boundary neutrals, LRM and RLM. The position maps and levels are
  kept in step with the text, and a `RemovalResult` is returned. A `str`
  input gives a `str` back; any other sequence of code points gives a list.
  If only `positions_to_this` is given, the inverse map is worked out from it.
  In the returned `positions_to_this`, an entry that pointed at a removed
  character is set to -1.
- `debug_status()` and `set_debug(state)`: a debug switch. While it is on,
  `remove_bidi_marks` writes a message to the `bidikit.marks` logger.

## Example

```python
from bidikit.types import BidiType
from bidikit.joining_types import JoiningType, joins_left, joins_right
from bidikit.joining import join_arabic

# Three dual-joining Arabic letters on a right-to-left line
types = [BidiType.AL] * 3
levels = [1, 1, 1]
props = [JoiningType.D] * 3

joined = join_arabic(types, levels, props)
# At an RTL level the first letter keeps only its left-joining bit, the last
# letter only its right-joining bit, and the middle letter keeps both.
print([(joins_right(p), joins_left(p)) for p in joined])
```

```python
from bidikit.marks import remove_bidi_marks

result = remove_bidi_marks("a\u200fb\u202ac", embedding_levels=[0, 0, 0, 0, 0])
print(result.text)              # "abc"
print(result.embedding_levels)  # [0, 0, 0]
```

## What it does not do

bidikit supplies the parts listed above and nothing more. It does not:

- resolve paragraph embedding levels;
- reorder a line into visual order;
- look up bracket pairs or mirrored characters;
- apply Arabic presentation-form shaping;
- convert between legacy character sets.

It has no command-line tool.

## Tests

```
pip install "bidikit[test]"
pytest
```
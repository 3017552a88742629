# walletfw

An in-memory model of the core logic of a small hardware wallet: a 128×64
monochrome framebuffer with its bitmap font, dialog and progress screens,
random-number helpers, the flash memory layout, and Bitcoin script and
transaction serialization. It has no runtime dependencies.

## Modules

- **`walletfw.fonts`**: the 8-pixel-high bitmap font. `char_width(c)` and
  `char_data(c)` take a one-character string or a byte value 0–255 and return
  the glyph width and its column bytes. Codes without a glyph are one blank
  column wide. `FONT_HEIGHT` is 8.
- **`walletfw.oled`**: the framebuffer. `Display(on_refresh=None)` keeps a
  1024-byte buffer (`WIDTH` 128, `HEIGHT` 64, `BUFSIZE` 1024) in the panel's
  own byte order and offers `clear`, `draw_pixel`, `clear_pixel`, `get_pixel`,
  `draw_char`, `string_width`, `draw_string`, `draw_string_center`,
  `draw_string_right`, `draw_bitmap`, `invert`, `box`, `hline`, `frame`,
  `swipe_left`, `swipe_right`, `get_buffer` and `set_buffer`. `refresh()` passes
  a copy of the buffer to `on_refresh`; with `set_debug(True)` a small triangle
  is toggled in the upper right corner for the duration of each refresh.
  Text may be `str` (encoded as UTF-8) or `bytes`; `convert_char` shows how
  bytes map to glyphs: ASCII as is, the lead byte of a multi-byte sequence as
  `_`, continuation bytes dropped. `Bitmap(width, height, data)` is a 1-bit
  image stored row by row, most significant bit leftmost.
- **`walletfw.layout`**: `Layout(display, icons=None, gears=None)` draws
  `dialog(...)` screens with an optional `DialogIcon` (`NONE`, `ERROR`, `INFO`,
  `QUESTION`, `WARNING`, `OK`), up to six text lines, a centred description and
  "no"/"yes" buttons, and `progress(desc, permil)` screens with a progress bar.
  `progress_update(refresh)` steps a four-frame gear animation.
- **`walletfw.rng`**: `RandomSource(source=None)` wraps any callable returning
  32-bit words (default: `secrets`) and provides `random32()`, `uniform(n)`
  (unbiased, in `range(n)`), `buffer(length)` and in-place `permute(items)`.
  A word equal to the previous one is discarded and the source read again.
- **`walletfw.util`**: `uint32_hex(num)` (8 uppercase hex digits),
  `data_to_hex(data)` and `read_protobuf_int(data, offset=0)`, which returns the
  decoded varint (at most five bytes, truncated to 32 bits) and the offset after it.
- **`walletfw.serialno`**: `serial_from_unique_id(unique_id)` turns a 12-byte
  chip id into a 24-digit hex serial (first 12 bytes of its double SHA-256).
- **`walletfw.memory`**: flash layout constants (`FLASH_BOOT_START`,
  `FLASH_META_START`, `FLASH_STORAGE_START`, sector numbers, …),
  `needs_protection(option_bytes_1, option_bytes_2)` and
  `bootloader_hash(flash_image)`, the double SHA-256 of the first
  `FLASH_BOOT_LEN` bytes of a flash image.
- **`walletfw.transaction`**: `op_push`, `compile_script_multisig`,
  `compile_script_multisig_hash`, `serialize_script_sig`,
  `serialize_script_multisig`, `estimate_size` and `estimate_size_kb`;
  `TxInput` and `TxOutput`; `TxSerializer`, which returns raw transaction bytes
  one input or output at a time, and `TxHasher`, which hashes them instead and
  returns the double SHA-256 from `digest(reverse=False)`.

Invalid arguments raise `ValueError`, including adding more inputs or outputs
than announced, or an output before all inputs.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Render a dialog and capture the refreshed buffer:

```python
from walletfw.oled import Display
from walletfw.layout import Layout, DialogIcon

frames = []
display = Display(on_refresh=frames.append)
layout = Layout(display)
layout.dialog(DialogIcon.NONE, "Cancel", "Confirm", None,
              "Send", "0.1 BTC", "to", "address?")
print(len(frames[-1]))  # 1024
```

Icons and gear frames are bitmaps you supply:

```python
from walletfw.oled import Bitmap

square = Bitmap(8, 8, bytes([0xFF] * 8))
layout = Layout(display, icons={DialogIcon.OK: square}, gears=[square] * 4)
layout.progress("Working", 500)
```

Serialize and hash a transaction piece by piece:

```python
from walletfw.transaction import TxSerializer, TxHasher, TxInput, TxOutput

tx_in = TxInput(prev_hash=bytes(32), prev_index=0)
tx_out = TxOutput(amount=0, script_pubkey=b"\x6a")

tx = TxSerializer(inputs_len=1, outputs_len=1)
raw = tx.serialize_input(tx_in) + tx.serialize_output(tx_out)

hasher = TxHasher(inputs_len=1, outputs_len=1)
hasher.add_input(tx_in)
hasher.add_output(tx_out)
print(raw.hex(), hasher.digest(reverse=True).hex())
```

Draw from a deterministic entropy source:

```python
import itertools
from walletfw.rng import RandomSource

counter = itertools.count(1)
rng = RandomSource(lambda: next(counter))
print(rng.uniform(10), rng.buffer(6).hex())
```

## What it does not do

The package works on buffers and bytes only. It does not drive a display
panel (`Display.refresh` just hands the buffer to your callback), ships no
icon, logo or gear bitmaps, does not read or program option bytes or flash,
and has no USB transport, message handling, key derivation or address
decoding. `TxOutput` takes an already compiled `script_pubkey`.
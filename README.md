# hdrshot

Image-processing core of an HDR screenshot tool, in pure Python with no
third-party dependencies.

It takes raw captured frames, converts HDR content (scRGB half floats or
HDR10 PQ-encoded Rec.2020) to packed 8-bit sRGB, and encodes the result as a
PNG file or as a 24-bit device-independent bitmap. It also reads and writes
the tool's INI-style configuration, parses hotkey strings and builds
timestamped file names.

## Install

```
pip install hdrshot
```

## Modules

- `hdrshot.config`: the `Config` dataclass and `load_config`, `save_config`,
  `ensure_config_file` for `config.ini`. Keys are `RegionHotkey`,
  `FullscreenHotkey`, `SavePath`, `SaveToFile`, `AutoCreateSaveDir`,
  `AutoStart`, `DebugMode`, `UseACESFilmToneMapping`, `SDRBrightness`
  (clamped to 80..1000), `FullscreenCurrentMonitor`, `RegionFullscreenMonitor`
  and `CaptureRetryCount` (clamped to 1..10). Booleans are true when the value
  is `true` or `1`. `load_config` raises `OSError` if the file cannot be
  opened and `ValueError` if a numeric setting is not a number.
- `hdrshot.tonemap`: `tone_map_aces` and `tone_map_reinhard` (on flat lists of
  RGB components), `linear_to_srgb`, `pq_to_linear` (PQ signal to nits) and
  `half_to_float`.
- `hdrshot.imagebuffer`: `PixelFormat` (`RGBA_F16`, `RGBA10A2`, `BGRA8`,
  `RGB8`, `UNKNOWN`) and `ImageBuffer`, a frame with `format`, `width`,
  `height`, `stride` and `data`.
- `hdrshot.pixelconvert`: `DxgiFormat`, `convert_to_rgb8(image)` and
  `to_srgb8(fmt, image, is_hdr=False, config=None)`. Both return a new
  `ImageBuffer` in `PixelFormat.RGB8`. HDR frames are scaled by
  `config.sdr_brightness / 1000` and tone mapped with ACES or Reinhard;
  HDR10 frames are also converted from Rec.2020 to sRGB primaries.
- `hdrshot.png`: `encode_png(rgb, width, height)` returns PNG bytes;
  `save_rgb_png(rgb, width, height, path)` writes them to a file.
- `hdrshot.dib`: `rgb_to_dib(rgb, width, height)` returns a bottom-up 24-bit
  DIB (header followed by BGR rows padded to 4 bytes), the layout used for
  bitmaps on the clipboard.
- `hdrshot.hotkey`: `Modifier`, `Hotkey` and `parse_hotkey`, e.g.
  `parse_hotkey("ctrl+alt+a")` gives `Hotkey(Modifier.CONTROL | Modifier.ALT, 0x41)`.
  Raises `ValueError` if the text holds no letter or digit.
- `hdrshot.paths`: `exe_dir`, `resolve_save_path`, `ensure_directory`,
  `make_timestamped_png_name` (`yyyyMMdd_HHmmss.png`), `is_absolute`, `join`.
- `hdrshot.timestamps`: `format_timestamp_for_filename` (`yyyy-MM-dd_HH-mm-ss`).
- `hdrshot.logger`: `Logger` and `get_logger`. Lines such as `ERR: message`
  go to the standard `logging` channel `hdrshot` and, after
  `enable_file_logging(path)`, are appended to that file.

## Example

```python
from hdrshot.config import load_config
from hdrshot.imagebuffer import ImageBuffer, PixelFormat
from hdrshot.pixelconvert import DxgiFormat, to_srgb8
from hdrshot.png import save_rgb_png

config = load_config("config.ini")

# One R10G10B10A2 pixel at full PQ signal on every channel.
pixel = (0x3 << 30 | 0x3FF << 20 | 0x3FF << 10 | 0x3FF).to_bytes(4, "little")
frame = ImageBuffer(PixelFormat.RGBA10A2, 1, 1, 4, bytearray(pixel))

rgb = to_srgb8(DxgiFormat.R10G10B10A2_UNORM, frame, True, config)
save_rgb_png(bytes(rgb.data), rgb.width, rgb.height, "shot.png")
```

## What it does not do

This package processes frames that have already been captured. It does not
grab the screen, register global hotkeys, show a region-selection overlay or
a tray icon, put data on the clipboard (it only builds the DIB bytes), or
create start-up shortcuts, and it has no command-line program.

## Tests

```
pip install -e .[test]
pytest
```
import pytest

from hdrshot.config import Config, ensure_config_file, load_config, save_config


def test_defaults_round_trip(tmp_path):
    path = tmp_path / "config.ini"
    save_config(Config(), path)
    assert load_config(path) == Config()


def test_custom_round_trip(tmp_path):
    path = tmp_path / "config.ini"
    cfg = Config(
        region_hotkey="ctrl+b",
        save_path="D:/shots",
        save_to_file=False,
        auto_start=True,
        use_aces_film_tone_mapping=True,
        sdr_brightness=300.5,
        capture_retry_count=7,
    )
    save_config(cfg, path)
    assert load_config(path) == cfg


def test_saved_file_layout(tmp_path):
    path = tmp_path / "config.ini"
    save_config(Config(), path)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "; HDR Screenshot Tool Configuration"
    assert "RegionHotkey=ctrl+alt+a" in lines
    assert "FullscreenHotkey=ctrl+shift+alt+a" in lines
    assert "SDRBrightness=250" in lines
    assert "SaveToFile=true" in lines
    assert "AutoStart=false" in lines
    assert len(lines) == 13


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.ini")


def test_comments_and_malformed_lines_ignored(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text(
        "; comment\n# other=1\n\nnot a setting\nUnknownKey=9\n  SavePath =  shots  \n",
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert cfg.save_path == "shots"
    assert cfg.region_hotkey == Config().region_hotkey


def test_bool_parsing(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("AutoStart=1\nDebugMode=true\nSaveToFile=TRUE\nAutoCreateSaveDir=yes\n", encoding="utf-8")
    cfg = load_config(path)
    assert cfg.auto_start is True
    assert cfg.debug_mode is True
    assert cfg.save_to_file is False
    assert cfg.auto_create_save_dir is False


@pytest.mark.parametrize(
    "text, expected",
    [("5000", 1000.0), ("10", 80.0), ("-3", 80.0)],
)
def test_sdr_brightness_clamped(tmp_path, text, expected):
    path = tmp_path / "config.ini"
    path.write_text(f"SDRBrightness={text}\n", encoding="utf-8")
    assert load_config(path).sdr_brightness == expected


@pytest.mark.parametrize("text, expected", [("0", 1), ("99", 10), ("-5", 1)])
def test_retry_count_clamped(tmp_path, text, expected):
    path = tmp_path / "config.ini"
    path.write_text(f"CaptureRetryCount={text}\n", encoding="utf-8")
    assert load_config(path).capture_retry_count == expected


def test_number_prefix_is_read(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("CaptureRetryCount=5abc\nSDRBrightness=400.5nits\n", encoding="utf-8")
    cfg = load_config(path)
    assert cfg.capture_retry_count == 5
    assert cfg.sdr_brightness == 400.5


@pytest.mark.parametrize("line", ["SDRBrightness=bright", "CaptureRetryCount=", "CaptureRetryCount=x1"])
def test_invalid_number_raises(tmp_path, line):
    path = tmp_path / "config.ini"
    path.write_text(line + "\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_out_of_range_integer_raises(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("CaptureRetryCount=99999999999\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_base_values_kept(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("DebugMode=true\n", encoding="utf-8")
    base = Config(save_path="elsewhere", capture_retry_count=9)
    cfg = load_config(path, base)
    assert cfg.save_path == "elsewhere"
    assert cfg.capture_retry_count == 9
    assert cfg.debug_mode is True
    assert base.debug_mode is False


def test_ensure_creates_missing_file(tmp_path):
    path = tmp_path / "config.ini"
    cfg = Config(save_path="pics")
    ensure_config_file(cfg, path)
    assert load_config(path) == cfg


def test_ensure_completes_existing_file(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("SavePath=kept\n", encoding="utf-8")
    ensure_config_file(Config(save_path="ignored", auto_start=True), path)
    text = path.read_text(encoding="utf-8")
    assert "SavePath=kept" in text
    assert "CaptureRetryCount=3" in text
    assert load_config(path) == Config(save_path="kept")
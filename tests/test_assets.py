import wave

import pygame
import pytest

from breakout.assets import AudioManager, TextManager, TextureManager, darken

BLACK = (0, 0, 0, 255)


def _image_file(tmp_path, colour, size=(10, 10), name="img.bmp"):
    image = pygame.Surface(size)
    image.fill(colour)
    path = tmp_path / name
    pygame.image.save(image, str(path))
    return path


def _canvas(size=(40, 40)):
    canvas = pygame.Surface(size)
    canvas.fill(BLACK)
    return canvas


def test_darken_scales_full_channel():
    image = pygame.Surface((2, 2))
    image.fill((255, 255, 255))
    dark = darken(image)
    assert tuple(dark.get_at((1, 1)))[:3] == (51, 51, 51)


def test_darken_leaves_original_and_never_brightens():
    image = pygame.Surface((3, 3))
    image.fill((100, 200, 50))
    dark = darken(image)
    original = image.get_at((0, 0))
    result = dark.get_at((0, 0))
    assert tuple(original) == (100, 200, 50, 255)
    assert result.r < original.r and result.g < original.g and result.b < original.b
    assert result.a == original.a
    assert dark.get_size() == image.get_size()


def test_load_image_and_draw(tmp_path):
    textures = TextureManager()
    assert textures.load_image(_image_file(tmp_path, (200, 0, 0)), "brick")
    canvas = _canvas()
    textures.draw("brick", 5, 5, 10, 10, canvas, False)
    assert tuple(canvas.get_at((5, 5))) == (200, 0, 0, 255)
    assert tuple(canvas.get_at((14, 14))) == (200, 0, 0, 255)
    assert tuple(canvas.get_at((4, 4))) == BLACK
    assert tuple(canvas.get_at((15, 15))) == BLACK


def test_draw_copies_only_requested_area(tmp_path):
    textures = TextureManager()
    textures.load_image(_image_file(tmp_path, (0, 200, 0)), "paddle")
    canvas = _canvas()
    textures.draw("paddle", 0, 0, 4, 2, canvas, False)
    assert tuple(canvas.get_at((3, 1))) == (0, 200, 0, 255)
    assert tuple(canvas.get_at((4, 1))) == BLACK
    assert tuple(canvas.get_at((3, 2))) == BLACK


def test_draw_dimmed_matches_darken(tmp_path):
    textures = TextureManager()
    textures.load_image(_image_file(tmp_path, (150, 100, 250)), "ball")
    canvas = _canvas()
    textures.draw("ball", 0, 0, 10, 10, canvas, True)
    expected = darken(textures.textures["ball"]).get_at((0, 0))
    assert canvas.get_at((2, 2)) == expected


def test_existing_key_is_not_replaced(tmp_path):
    textures = TextureManager()
    textures.load_image(_image_file(tmp_path, (10, 20, 30), name="a.bmp"), "effect")
    assert textures.load_image(_image_file(tmp_path, (90, 90, 90), name="b.bmp"), "effect")
    canvas = _canvas()
    textures.draw("effect", 0, 0, 5, 5, canvas, False)
    assert tuple(canvas.get_at((0, 0))) == (10, 20, 30, 255)


def test_missing_image_and_unknown_key(tmp_path):
    textures = TextureManager()
    assert textures.load_image(tmp_path / "absent.png", "nothing") is False
    assert "nothing" not in textures.textures
    canvas = _canvas()
    textures.draw("nothing", 0, 0, 10, 10, canvas, False)
    assert tuple(canvas.get_at((0, 0))) == BLACK


def test_text_is_written_in_colour():
    text = TextManager()
    assert text.load_font(None, "regular")
    canvas = _canvas((100, 50))
    text.write_text("regular", 0, 0, 100, 50, canvas, "HI", (255, 255, 255, 255))
    pixels = {
        tuple(canvas.get_at((x, y))) for x in range(100) for y in range(50)
    }
    assert (255, 255, 255, 255) in pixels


def test_text_stays_inside_rectangle():
    text = TextManager()
    text.load_font(None, "regular")
    canvas = _canvas((100, 50))
    text.write_text("regular", 10, 10, 20, 10, canvas, "HI", (255, 255, 255, 255))
    outside = [
        tuple(canvas.get_at((x, y)))
        for x in range(100)
        for y in range(50)
        if not (10 <= x < 30 and 10 <= y < 20)
    ]
    assert set(outside) == {BLACK}


def test_text_unknown_font_and_empty_text():
    text = TextManager()
    assert text.load_font("/no/such/font.ttf", "broken") is False
    canvas = _canvas()
    text.write_text("broken", 0, 0, 40, 40, canvas, "HI", (255, 255, 255, 255))
    text.load_font(None, "regular")
    text.write_text("regular", 0, 0, 40, 40, canvas, "", (255, 255, 255, 255))
    assert {tuple(canvas.get_at((x, y))) for x in range(40) for y in range(40)} == {BLACK}


def test_load_font_keeps_existing_key():
    text = TextManager()
    text.load_font(None, "regular")
    first = text.fonts["regular"]
    assert text.load_font("/no/such/font.ttf", "regular") is True
    assert text.fonts["regular"] is first


@pytest.fixture
def audio(monkeypatch):
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    manager = AudioManager(True)
    yield manager
    pygame.mixer.quit()


def _wav(tmp_path):
    path = tmp_path / "hit.wav"
    with wave.open(str(path), "wb") as out:
        out.setnchannels(1)
        out.setsampwidth(2)
        out.setframerate(44100)
        out.writeframes(b"\x00\x00" * 200)
    return path


def test_sound_plays_when_enabled(audio, tmp_path):
    audio.load_sound("hit", _wav(tmp_path))
    assert audio.play_sound("hit") is True


def test_sound_silent_when_disabled(audio, tmp_path):
    audio.load_sound("hit", _wav(tmp_path))
    audio.set_sound(False)
    assert audio.play_sound("hit") is False
    audio.set_sound(True)
    assert audio.play_sound("hit") is True


def test_missing_and_unknown_sounds(audio, tmp_path):
    audio.load_sound("hit", tmp_path / "absent.wav")
    assert "hit" in audio.sounds
    assert audio.play_sound("hit") is False
    assert audio.play_sound("other") is False
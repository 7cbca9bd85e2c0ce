import numpy as np
import pytest
from PIL import Image


def _create_gradient_image(width: int, height: int) -> Image.Image:
    horizontal = np.linspace(0, 255, width, dtype=np.uint8)
    vertical = np.linspace(0, 255, height, dtype=np.uint8)
    pixels = np.zeros((height, width, 3), dtype=np.uint8)
    pixels[..., 0] = horizontal[np.newaxis, :]
    pixels[..., 1] = vertical[:, np.newaxis]
    pixels[..., 2] = 128
    return Image.fromarray(pixels)


def _create_half_transparent_image(width: int, height: int) -> Image.Image:
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    pixels[:, width // 2 :] = (0, 0, 255, 255)
    return Image.fromarray(pixels)


@pytest.fixture
def landscape_png(tmp_path):
    image_path = tmp_path / "landscape.png"
    _create_gradient_image(200, 100).save(image_path, "PNG")
    return image_path


@pytest.fixture
def portrait_jpeg(tmp_path):
    image_path = tmp_path / "portrait.jpg"
    _create_gradient_image(120, 300).save(image_path, "JPEG", quality=95)
    return image_path


@pytest.fixture
def transparent_png(tmp_path):
    image_path = tmp_path / "transparent.png"
    _create_half_transparent_image(40, 20).save(image_path, "PNG")
    return image_path


@pytest.fixture
def small_gif(tmp_path):
    image_path = tmp_path / "small.gif"
    _create_gradient_image(60, 30).save(image_path, "GIF")
    return image_path


@pytest.fixture
def bmp_file(tmp_path):
    image_path = tmp_path / "bitmap.bmp"
    _create_gradient_image(20, 20).save(image_path, "BMP")
    return image_path


@pytest.fixture
def text_file(tmp_path):
    file_path = tmp_path / "notes.png"
    file_path.write_text("this is not an image")
    return file_path


@pytest.fixture
def truncated_png(tmp_path):
    noise = np.random.default_rng(seed=7).integers(0, 256, (64, 64, 3), dtype=np.uint8)
    image_path = tmp_path / "truncated.png"
    Image.fromarray(noise).save(image_path, "PNG", compress_level=0)
    full_bytes = image_path.read_bytes()
    image_path.write_bytes(full_bytes[: len(full_bytes) // 2])
    return image_path


@pytest.fixture
def output_dir(tmp_path):
    directory = tmp_path / "output"
    directory.mkdir()
    return directory


@pytest.fixture
def write_image(tmp_path):
    def _write(width: int, height: int, name: str = "sized.png"):
        image_path = tmp_path / name
        _create_gradient_image(width, height).save(image_path, "PNG")
        return image_path

    return _write


@pytest.fixture
def write_bytes(tmp_path):
    def _write(name: str, content: bytes):
        file_path = tmp_path / name
        file_path.write_bytes(content)
        return file_path

    return _write


@pytest.fixture
def broken_crc_png(tmp_path):
    image_path = tmp_path / "broken_crc.png"
    _create_gradient_image(16, 16).save(image_path, "PNG")
    png_bytes = bytearray(image_path.read_bytes())
    # IHDR CRC: 8-byte signature, 8-byte chunk header, 13 data bytes.
    png_bytes[29] ^= 0xFF
    image_path.write_bytes(bytes(png_bytes))
    return image_path


@pytest.fixture
def sixteen_bit_png(tmp_path):
    image_path = tmp_path / "deep.png"
    Image.fromarray(np.full((8, 8), 40000, dtype=np.uint16)).save(image_path, "PNG")
    return image_path


@pytest.fixture
def semi_transparent_png(tmp_path):
    pixels = np.zeros((4, 4, 4), dtype=np.uint8)
    pixels[:, :2] = (10, 20, 30, 128)
    pixels[:, 2:] = (200, 100, 50, 0)
    image_path = tmp_path / "semi.png"
    Image.fromarray(pixels).save(image_path, "PNG")
    return image_path

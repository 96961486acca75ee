from pixel_proxy.processing.buffer import PixelBuffer

BLACK_WHITE = ((0, 0, 0), (255, 255, 255))


def uniform(width, height, rgba):
    return PixelBuffer(width, height, bytearray(bytes(rgba) * (width * height)))


def gradient(width, height, alpha=255):
    data = bytearray()
    for y in range(height):
        for x in range(width):
            data.extend(((x * 37 + y * 11) % 256, (x * 13 + y * 53) % 256, (x * 71 + y * 29) % 256, alpha))
    return PixelBuffer(width, height, data)


def pixels(buffer):
    return [buffer.pixel(x, y) for y in range(buffer.height) for x in range(buffer.width)]


def flip_rows(buffer):
    row = buffer.width * 4
    rows = [buffer.data[i : i + row] for i in range(0, len(buffer.data), row)]
    return PixelBuffer(buffer.width, buffer.height, bytearray(b"".join(reversed(rows))))

import base64

AUDIO_MIME = "audio/mp3"

# MPEG audio bitrate index 0b1111 is reserved, 0b0000 is "free format"
_RESERVED_BITRATE = 0x0F


def encode_audio(audio: bytes) -> str:
    return base64.b64encode(audio).decode("utf-8")


def decode_audio(audio_b64: str) -> bytes:
    return base64.b64decode(audio_b64, validate=True)


def has_mp3_header(audio: bytes) -> bool:
    """True when the bytes open with an ID3v2 tag or an MPEG audio frame header."""
    if audio.startswith(b"ID3"):
        return True
    if len(audio) < 4:
        return False
    b1, b2, b3 = audio[1], audio[2], audio[3]
    if audio[0] != 0xFF or (b1 & 0xE0) != 0xE0:
        return False
    version = (b1 >> 3) & 0x03
    layer = (b1 >> 1) & 0x03
    bitrate = (b2 >> 4) & 0x0F
    sample_rate = (b2 >> 2) & 0x03
    emphasis = b3 & 0x03
    return (
        version != 0x01
        and layer != 0x00
        and bitrate != _RESERVED_BITRATE
        and sample_rate != 0x03
        and emphasis != 0x02
    )


def download_name(mode: str) -> str:
    return f"{mode}.mp3"

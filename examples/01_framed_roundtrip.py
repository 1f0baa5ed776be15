from errdetect.crc import crc16_config
from errdetect.detect import stage as detect_stage
from errdetect.detect.modules.crc import Config as CrcTrailerConfig
from errdetect.errors import CheckMismatch


if __name__ == "__main__":
    modbus = crc16_config(0x8005, initial=0xFFFF, reflect_input=True, reflect_output=True)
    cfg = detect_stage.Config(
        module="crc",
        module_cfg=CrcTrailerConfig(params=modbus, byteorder="little"),
    )

    payload = b"\x01\x03\x00\x00\x00\x0a"
    frame = detect_stage.tx(payload, cfg=cfg)
    print(f"TX frame: {frame.hex(' ')}")
    print(f"RX payload: {detect_stage.rx(frame, cfg=cfg).hex(' ')}")

    corrupted = bytearray(frame)
    corrupted[2] ^= 0x10
    try:
        detect_stage.rx(bytes(corrupted), cfg=cfg)
    except CheckMismatch as e:
        print(f"corrupted frame rejected: {e}")

from errdetect import catalog
from errdetect.crc import crc


if __name__ == "__main__":
    for name in catalog.available():
        cfg = catalog.get(name)
        got = crc(cfg, catalog.CHECK_INPUT)
        exp = catalog.CHECK_VALUES[name]
        digits = cfg.width // 4
        status = "ok" if got == exp else "MISMATCH"
        print(f"{name:<20} 0x{got:0{digits}X}  expected 0x{exp:0{digits}X}  {status}")

import argparse
from coder import Coding, PrefixCoder, TieBreak
from reader.reader import FrequencyReader
from utils.bit_magic import bits_to_string


def main(argv=None):
    ap = argparse.ArgumentParser(description="Print Huffman codes for the bytes of a file.")
    ap.add_argument("path", nargs="?", default="images.bmp", help="file to read (default images.bmp)")
    ap.add_argument("--tie-break", choices=[t.name.lower() for t in TieBreak], default="insertion",
                    help="ordering among equal byte counts (default insertion)")
    ap.add_argument("--verbose", action="store_true", help="print reading and code statistics")
    args = ap.parse_args(argv)

    frequencies = FrequencyReader.read_from_file(args.path, verbose=args.verbose)

    coder = PrefixCoder.create(Coding.HUFFMAN, tie_break=TieBreak[args.tie_break.upper()], verbose=args.verbose)
    codes = coder.calculate_codes(frequencies)
    if codes is None:
        print("Failed to build Huffman tree")
        return 0

    for byte in sorted(codes):
        print(f"{byte:3} (0x{byte:02X}):")
        print(bits_to_string(codes[byte]))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

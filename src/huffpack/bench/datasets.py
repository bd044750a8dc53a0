import random


def toy_text() -> str:
    """
    Small English-ish text with a skewed letter distribution.
    """
    return (
        "Huffman coding assigns short codes to frequent symbols.\n"
        "Rare symbols get longer codes, and no code is a prefix of another.\n"
        "The code table travels with the payload so the decoder can rebuild the tree.\n"
        "\n"
        "Notes:\n"
        "- one static frequency pass over the whole input\n"
        "- the last byte of the payload may be padded with zero bits\n"
        "- the header records how many bits of that byte are real\n"
        "\n"
        "Reminder: padding bits are never decoded.\n"
        "Reminder: padding bits are never decoded.\n"
        "Reminder: padding bits are never decoded.\n"
    )


def toy_big_text(repeats: int = 30) -> str:
    """
    Repetition-heavy text. Good for gzip/zstd, which see the repeats;
    Huffman only sees the byte histogram.
    """
    base = toy_text()
    out = []
    for i in range(repeats):
        out.append(f"--- LOOP {i} ---\n")
        out.append(base)
        out.append("\n")
    return "".join(out)


def skewed_bytes(n: int = 65536, seed: int = 7) -> bytes:
    """
    Random bytes from a geometric-ish distribution: few symbols dominate,
    no long repeats. Huffman's home turf.
    """
    rng = random.Random(seed)
    alphabet = list(range(64))
    weights = [0.5 ** (i / 8) for i in alphabet]
    return bytes(rng.choices(alphabet, weights=weights, k=n))


def toy_datasets() -> dict:
    return {
        "toy_text": toy_text().encode("utf-8"),
        "toy_big_text": toy_big_text().encode("utf-8"),
        "skewed_bytes": skewed_bytes(),
    }

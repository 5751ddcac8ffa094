"""Tests for the demonstration harness."""

from tea2cipher.demo import DEMO_VECTORS, format_words, run_demo


EXPECTED_TRANSCRIPT = "TEA2 by Alexander PUKALL 2006 \n" + """\
 128-bit block 256-bit key 128 rounds
Code can be freely use even for commercial software
Based on TEA by David Wheeler & Roger M. Needham

Encryption 1
Key: 0000000000000000 0000000000000000 0000000000000000 0000000000000001
Plaintext: 0000000000000000 0000000000000000
Ciphertext:D713374DD796B948 93E198C8BF480EEA
Decrypted: 0000000000000000 0000000000000000

Encryption 2
Key: 0000000000000000 0000000000000000 0000000000000000 0000000000000001
Plaintext: 0000000000000000 0000000000000001
Ciphertext:85B25256E406EF80 88B6D9C61E7C08F1
Decrypted: 0000000000000000 0000000000000001

Encryption 3
Key: 0000000000000000 0000000000000000 0000000000000000 0000000000000001
Plaintext: 0000000000000001 0000000000000001
Ciphertext:9F6CCED0EAF20C18 CA4F15379C175F5C
Decrypted: 0000000000000001 0000000000000001

"""


def test_format_words():
    assert format_words((0, 1)) == "0000000000000000 0000000000000001"
    assert format_words((0xD713374DD796B948,)) == "D713374DD796B948"


def test_demo_transcript(capsys):
    """The printed output matches the reference program line for line."""
    run_demo()
    assert capsys.readouterr().out == EXPECTED_TRANSCRIPT


def test_demo_decrypts_back_to_plaintext():
    lines = []
    run_demo(out=lines.append)

    plaintexts = [line for line in lines if line.startswith("Plaintext: ")]
    decrypted = [line for line in lines if line.startswith("Decrypted: ")]
    assert len(plaintexts) == len(decrypted) == len(DEMO_VECTORS)
    for p, d in zip(plaintexts, decrypted):
        assert p[len("Plaintext: "):] == d[len("Decrypted: "):].rstrip("\n")


def test_demo_vectors_expected_ciphertexts():
    from tea2cipher import encrypt

    for key, plaintext, ciphertext in DEMO_VECTORS:
        assert encrypt(plaintext, key) == ciphertext

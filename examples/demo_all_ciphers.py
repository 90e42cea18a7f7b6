"""
classic_crypto — Live Demo: All Three Tiers
===========================================
Run:  python examples/demo_all_ciphers.py

Shows every tier encoding and decoding a sample message, including the
Scytale padding that survives a round trip.
"""

import sys, os, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from classic_crypto.tiers.tier1_caesar    import CaesarCipher
from classic_crypto.tiers.tier2_vigenere  import VigenereCipher
from classic_crypto.tiers.tier3_scytale   import ScytaleCipher, pad_message

LINE  = "═" * 70
MSG   = "ATTACK AT DAWN"
MSG_S = MSG.replace(" ", "_")   # Scytale alphabet uses '_' for space

def header(tier, name):
    print(f"\n{LINE}")
    print(f"  Tier {tier} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

logging.basicConfig(level=logging.INFO, format=' %(message)s')

print(f"\n{LINE}")
print("  classic_crypto — Three-Tier Demo")
print(LINE)
print(f"  Message: {MSG}\n")

# ── TIER 1 ───────────────────────────────────────────────────────────────────
header(1, "MONOALPHABETIC — Caesar")
c  = CaesarCipher(3)
ct = c.encrypt(MSG)
ok("Encrypted", ct)
ok("Decrypted", c.decrypt(ct))

# ── TIER 2 ───────────────────────────────────────────────────────────────────
header(2, "POLYALPHABETIC — Vigenère")
v  = VigenereCipher("LEMON")
ct = v.encrypt(MSG)
ok("Key stream", " ".join(str(k) for k in v.keystream(len(MSG))))
ok("Encrypted", ct)
ok("Decrypted", v.decrypt(ct))
ok("Spaces consume key positions — period = key length")

# ── TIER 3 ───────────────────────────────────────────────────────────────────
header(3, "TRANSPOSITION — Scytale")
for cols in (3, 4, len(MSG_S)):
    s  = ScytaleCipher(cols)
    ct = s.encrypt(MSG_S)
    pt = s.decrypt(ct)
    ok(f"{cols} columns", f"grid {s.rows_for(MSG_S)}x{cols}  {ct}  ->  {pt}")
    assert pt == pad_message(MSG_S, cols)

print(f"\n{LINE}")
print("  All tiers: PASSED")
print(f"{LINE}\n")

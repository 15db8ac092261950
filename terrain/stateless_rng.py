# stateless_rng.py - coordinate hashed seeds so each tile gets its own stream
import random


def u32(n: int) -> int: return n & 0xFFFFFFFF

def hash32(x: int, y: int, layer_seed: int) -> int:
    h = u32(0x9E3779B9 ^ layer_seed)
    h = u32(h ^ (x * 0x85EBCA6B) ^ (y * 0xC2B2AE35))
    h ^= (h >> 16); h = u32(h * 0x85EBCA6B)
    h ^= (h >> 13); h = u32(h * 0xC2B2AE35)
    h ^= (h >> 16)
    return h

def tile_rng(column: int, row: int, seed: int) -> random.Random:
    """Independent ``random.Random`` for one tile, stable across runs."""
    return random.Random(hash32(column, row, seed))

#!/usr/bin/env python3
import argparse, csv, logging, os
from everclimb.log import setup_logging
from everclimb.mapgen.generator import generate_chunk
from everclimb.mapgen.reachability import analyze
from everclimb.mapgen.stitch import chunk_chain
from everclimb.difficulty import difficulty_for
from everclimb.tiles import Item

log = logging.getLogger("chunktool")

def write_tsv(mat, path, include_header=False):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t')
        if include_header:
            w.writerow(list(range(len(mat[0]))))
        for r in mat:
            w.writerow(r)

def _first(args):
    return generate_chunk(args.hex, args.seed, args.level, args.width, args.height)

def cmd_emit(args):
    chunk = _first(args)
    view = chunk.view()
    os.makedirs(args.outdir, exist_ok=True)
    for layer in ("terrain", "item"):
        path = os.path.join(args.outdir, f"{chunk.seed:08x}_L{chunk.level}_{layer}.tsv")
        write_tsv(view.as_matrix(layer), path, include_header=args.header)
        print(f"Wrote {path}")

def cmd_chain(args):
    for c in chunk_chain(_first(args), args.count):
        print(f"L{c.level:<4d} seed={c.seed:08x} {c.cols}x{c.rows} entrance={c.entrance_q:<3d} "
              f"coins={c.count(Item.COIN):<3d} food={c.count(Item.FOOD):<3d} boots={c.count(Item.BOOTS)}")

def cmd_audit(args):
    bad = 0
    for seed in range(args.seed, args.seed + args.count):
        chunk = generate_chunk(args.hex, seed, args.level, args.width, args.height)
        dead = analyze(chunk.view(), difficulty_for(chunk.level)).dead_rows()
        if dead:
            bad += 1
            log.error("seed %#010x level %d: dead rows %s", seed, args.level, dead)
    print(f"Audited {args.count} chunks at level {args.level}: {bad} with dead rows")
    return 1 if bad else 0

def main():
    p = argparse.ArgumentParser()
    p.add_argument('--seed', type=lambda s: int(s, 0), default=0xDEADBEEF)
    p.add_argument('--level', type=int, default=1)
    p.add_argument('--hex', type=int, default=24, help='Hex size in pixels')
    p.add_argument('--width', type=int, default=None)
    p.add_argument('--height', type=int, default=None)
    p.add_argument('-v', '--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--outdir', type=str, required=True)
    p1.add_argument('--header', action='store_true')
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('chain')
    p2.add_argument('--count', type=int, default=10)
    p2.set_defaults(func=cmd_chain)
    p3 = sub.add_parser('audit')
    p3.add_argument('--count', type=int, default=100)
    p3.set_defaults(func=cmd_audit)
    args = p.parse_args()
    setup_logging(args.verbose)
    raise SystemExit(args.func(args) or 0)

if __name__ == '__main__':
    main()

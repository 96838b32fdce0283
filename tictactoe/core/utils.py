def format_info(variant, depth, score, nodes, elapsed, move):
        nps = int(nodes / elapsed) if elapsed > 0 else 0
        move_str = str(move) if move is not None else "-"
        return (f"info variant {variant} depth {depth} score {score} nodes {nodes} "
                f"nps {nps} time {int(elapsed * 1000)} bestmove {move_str}")

"""
Save the sequence scatter plot and the transition graph for a seed.

Usage:
  python3 transition_plots.py --seed 0 3 6 --n 2000 --out vaneck_036
"""
import argparse

from vaneck.analysis.transitions import first_occurrences
from vaneck.viz.draw import draw_transition_graph, plot_sequence


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--seed', type=int, nargs='+', default=[0, 3, 6])
    parser.add_argument('--n', type=int, default=2000)
    parser.add_argument('--out', default='vaneck')
    args = parser.parse_args()

    plot_sequence(args.seed, args.n, save_path=f"{args.out}_sequence.png")
    G = draw_transition_graph(args.seed, args.n, save_path=f"{args.out}_transitions.png")

    first = first_occurrences(args.seed, args.n)
    missing = [v for v in range(50) if v not in first]
    print(f"|V|={G.number_of_nodes()} |E|={G.number_of_edges()}")
    print(f"values below 50 not yet spoken by turn {args.n}: {missing}")


if __name__ == '__main__':
    main()

#!/usr/bin/env python3
"""
Swarm Optimizer Runner Script

Runs the particle swarm optimizer on one of the bundled objective functions
until it converges, then reports the optimum and optionally exports the
final swarm state and a convergence plot.
"""

import argparse
import sys
import time
import traceback
from pathlib import Path

from SWARM_OPT.CONFIG import *
from SWARM_OPT.Graphics.graphing import plot_gbest_convergence, plot_swarm_2d
from SWARM_OPT.Logs import logger
from SWARM_OPT.Logs.logger import log_error, log_header, log_info, log_success, log_warning
from SWARM_OPT.PSO.ObjectiveFunctions.Loader import create_function, objective_function_classes
from SWARM_OPT.PSO.PSO import SwarmOptimizer
from SWARM_OPT.PSO.Parameters import Parameters

module_name = Path(__file__).stem


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Maximize a bounded objective with particle swarm optimization')

    parser.add_argument('--function', type=str, default=DEFAULT_FUNCTION,
                        choices=sorted(objective_function_classes),
                        help=f'Objective function (default: {DEFAULT_FUNCTION})')
    parser.add_argument('--dim', type=int, default=DEFAULT_DIM,
                        help=f'Problem dimension (default: {DEFAULT_DIM})')

    # Swarm parameters
    parser.add_argument('--particles', type=int, default=NUM_PARTICLES,
                        help=f'Number of particles (default: {NUM_PARTICLES})')
    parser.add_argument('--c-global', type=float, default=C_GLOBAL,
                        help=f'Acceleration towards the global best (default: {C_GLOBAL})')
    parser.add_argument('--c-local', type=float, default=C_LOCAL,
                        help=f'Acceleration towards the local best (default: {C_LOCAL})')
    parser.add_argument('--max-v', type=float, default=MAX_V,
                        help=f'Maximum velocity as a fraction of the range (default: {MAX_V})')
    parser.add_argument('--max-iterations', type=int, default=MAX_ITERATIONS,
                        help=f'Iteration cap (default: {MAX_ITERATIONS})')
    parser.add_argument('--max-const-iterations', type=int, default=MAX_CONST_ITERATIONS,
                        help=f'Steps without improvement before convergence (default: {MAX_CONST_ITERATIONS})')
    parser.add_argument('--no-reflect', action='store_true',
                        help='Mark particles leaving the box as out of bounds instead of reflecting them')
    parser.add_argument('--seed', type=int, default=DEFAULT_SEED,
                        help='Random seed (default: fresh entropy)')

    # Output
    parser.add_argument('--state-file', type=str, default=None,
                        help='Write the final swarm state (index, score, position) to this file')
    parser.add_argument('--plot', action='store_true',
                        help='Save a convergence plot (and the swarm for 2D functions)')
    parser.add_argument('--output-dir', type=str, default=FIGURES_DIR,
                        help=f'Directory for plots (default: {FIGURES_DIR})')
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug logging')
    return parser


def main(argv=None) -> int:
    """Main function to run the swarm optimizer. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    if args.debug:
        logger.configure(debug=True)

    params = Parameters(
        num_particles=args.particles,
        c_global=args.c_global,
        c_local=args.c_local,
        max_v=args.max_v,
        max_iterations=args.max_iterations,
        max_const_iterations=args.max_const_iterations,
        reflect=not args.no_reflect,
    )
    if not params.check():
        log_warning(f"Parameters were out of range and have been corrected: {params}", module_name)

    log_header("Starting Swarm Optimization", module_name)
    log_info(f"  Function: {args.function}, Dim: {args.dim}, Seed: {args.seed}", module_name)
    log_info(f"  {params}", module_name)

    start_time = time.time()
    try:
        function = create_function(args.function, args.dim)
        swarm = SwarmOptimizer(function=function, params=params, seed=args.seed)
        optimum = swarm.optimize()

        log_success(f"Finished after {swarm.get_progress()} steps in {time.time() - start_time:.2f} seconds", module_name)
        log_success(f"Best fitness: {swarm.get_value():.6e}", module_name)
        log_success(f"Optimum: {optimum}", module_name)

        if args.state_file:
            with open(args.state_file, "w") as f:
                swarm.write_state(f)
            log_info(f"Wrote swarm state to {args.state_file}", module_name)

        if args.plot:
            plot_gbest_convergence(swarm.gbest_history, title=f"{args.function} (dim={args.dim})",
                                   output_dir=args.output_dir)
            if args.dim == 2:
                plot_swarm_2d(swarm, output_dir=args.output_dir)
    except Exception as e:
        log_error(f"An error occurred during optimization: {e}", module_name)
        log_error(traceback.format_exc(), module_name)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

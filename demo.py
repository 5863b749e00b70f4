#!/usr/bin/env python3
"""Watch the random agent play seeded games."""
import time
import os

from minegrid import BoardConfig, MinesweeperEnv
from minegrid.agents import RandomAgent


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.3, games: int = 5, size: int = 9, mines: int = 10, seed: int = 0):
    """Run demo games with visualization."""
    config = BoardConfig(width=size, height=size, num_mines=mines)
    env = MinesweeperEnv(config=config, render_mode="ansi", seed=seed)
    agent = RandomAgent(size, size, seed=seed or None)

    print(f"Board: {size}x{size} with {mines} mines ({100*mines/(size*size):.1f}% density)")
    time.sleep(delay)

    wins = 0

    for game in range(games):
        # Consecutive seeds so a seeded demo replays the same sequence
        obs, info = env.reset(seed=seed + game if seed else None)
        agent.reset()

        clear_screen()
        print(f"=== Game {game + 1}/{games} (seed {info['seed']}) ===")
        print(f"Wins so far: {wins}\n")
        print(env.render())
        time.sleep(delay)

        done = False
        step = 0

        while not done:
            action = agent.select_action(obs, env.get_action_mask())
            x, y = agent.action_to_position(action)

            next_obs, reward, terminated, truncated, info = env.step(action)
            agent.update(obs, action, reward, next_obs, terminated)
            obs = next_obs
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: ({x}, {y})  remaining safe: {info['remaining_safe']}\n")
            print(env.render())

            if done:
                if info["game_state"] == "WON":
                    wins += 1
                    print("\n*** WIN! ***")
                else:
                    print("\n*** LOST (hit mine) ***")

            time.sleep(delay)

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--size", type=int, default=9, help="Board size (NxN)")
    parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    parser.add_argument("--seed", type=int, default=0, help="First game seed (0 = random)")
    args = parser.parse_args()

    demo(delay=args.delay, games=args.games, size=args.size, mines=args.mines, seed=args.seed)

"""
Simple simulation script.

Plays a batch of human-vs-computer games against a running server, with
the "human" side picking random legal moves, then runs a server-side
tournament.
"""

import requests
import random
import sys


def play_game(base_url, board_size, difficulty):
    """Play one pve game with random moves; returns the final move response."""
    response = requests.post(
        f"{base_url}/games",
        json={"board_size": board_size, "mode": "pve", "difficulty": difficulty}
    )
    if response.status_code != 200:
        print(f"Failed to create game: {response.text}")
        return None

    game_id = response.json()["id"]
    available_moves = [(r, c) for r in range(1, board_size + 1) for c in range(1, board_size + 1)]

    while available_moves:
        row, col = random.choice(available_moves)
        response = requests.post(
            f"{base_url}/games/{game_id}/move",
            json={"row": row, "col": col}
        )

        if response.status_code != 200:
            print(f"Move failed: {response.text}")
            return None

        move_result = response.json()
        # Our move and the computer's reply both take a cell
        for placed in move_result["moves"]:
            available_moves.remove((placed["row"], placed["col"]))

        if move_result["game_status"] != "in_progress":
            requests.delete(f"{base_url}/games/{game_id}")
            return move_result

    return None


def main():
    BASE_URL = "http://localhost:8000/api/v1"
    NUM_GAMES = 10
    DIFFICULTIES = ["random", "heuristic", "exhaustive"]

    print("=== Board Game Simulation ===\n")

    stats = {d: {"wins": 0, "losses": 0, "draws": 0} for d in DIFFICULTIES}

    for difficulty in DIFFICULTIES:
        print(f"\nPlaying {NUM_GAMES} games against the {difficulty} computer...")
        for game_num in range(NUM_GAMES):
            result = play_game(BASE_URL, 3, difficulty)
            if result is None:
                continue

            if result["is_draw"]:
                stats[difficulty]["draws"] += 1
                print(f"  Game {game_num + 1}: Draw")
            elif result["winner"] == "X":
                stats[difficulty]["wins"] += 1
                print(f"  Game {game_num + 1}: Random player won")
            else:
                stats[difficulty]["losses"] += 1
                print(f"  Game {game_num + 1}: Computer won")

    # Display results
    print("\n=== Results (random player vs computer) ===\n")
    for difficulty, result in stats.items():
        total = result["wins"] + result["losses"] + result["draws"]
        win_rate = (result["wins"] / total * 100) if total > 0 else 0
        print(f"  {difficulty}:")
        print(f"     Wins: {result['wins']}")
        print(f"     Losses: {result['losses']}")
        print(f"     Draws: {result['draws']}")
        print(f"     Win Rate: {win_rate:.1f}%")

    print("\nServer statistics:")
    response = requests.get(f"{BASE_URL}/stats")
    if response.status_code == 200:
        server_stats = response.json()
        print(f"  Games: {server_stats['total_games']}, X: {server_stats['x_wins']}, "
              f"O: {server_stats['o_wins']}, Draws: {server_stats['draws']}")

    print("\nTournament (heuristic X vs random O, 100 games on 4x4):")
    response = requests.post(
        f"{BASE_URL}/tournaments",
        json={"num_games": 100, "board_size": 4, "x_difficulty": "heuristic", "o_difficulty": "random"}
    )
    if response.status_code != 200:
        print(f"X Tournament failed: {response.text}")
        sys.exit(1)
    tournament = response.json()
    print(f"  X wins: {tournament['x_wins']}")
    print(f"  O wins: {tournament['o_wins']}")
    print(f"  Draws: {tournament['draws']}")

    print("\n Simulation complete!")


if __name__ == "__main__":
    main()

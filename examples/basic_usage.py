"""
Eudex 基本用法範例

展示指紋計算、距離比較，以及用 EudexMatcher 做「您是不是要找」查詢。
"""

from pyeudex import (
    EudexMatcher,
    eudex_hash,
    similar,
    string_distance,
    to_binary_string,
)


def demo_fingerprints():
    """指紋與相似判斷"""
    print("=" * 60)
    print("範例 1: 指紋與相似判斷")
    print("=" * 60)

    print(to_binary_string(eudex_hash("Jeff Buckley")))
    print(to_binary_string(eudex_hash("Tim Buckley")))
    print(similar("Jonny", "Johnny"))
    print(similar("Jonny", "Jahnny"))
    print(similar("Jonny", "Jenny"))
    print(string_distance("Jonny", "Jenny"))
    print(string_distance("Jonny", "Jentny"))
    print(similar("Trimothy", "Tony"))
    print()


def demo_matcher():
    """以 on_timing 回呼收集計時，並排序候選詞"""
    print("=" * 60)
    print("範例 2: EudexMatcher 候選排序")
    print("=" * 60)

    timing_data = []

    def collect_timing(operation: str, elapsed: float):
        timing_data.append((operation, elapsed))

    matcher = EudexMatcher(on_timing=collect_timing)
    words = ["Johnny", "Jenny", "Tony", "Jonathan", "Ronny", "Jhonny"]

    for match in matcher.rank("Jonny", words):
        print(f"  {match.candidate:<10} distance={match.distance:<4} edit={match.edit_distance}")

    print(matcher.group_similar(["maier", "meyer", "möier", "horse", "norse"]))

    for operation, elapsed in timing_data:
        print(f"  {operation}: {elapsed * 1000:.3f}ms")
    print()


if __name__ == "__main__":
    demo_fingerprints()
    demo_matcher()

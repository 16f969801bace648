#!/usr/bin/env python3
"""近接ライン描画のコスト計測（粒子数 vs フレーム時間）"""

import sys
import time
from pathlib import Path

import numpy as np
import pygame

# プロジェクトルートをパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from particlefield import config
from particlefield.config import FieldConfig
from particlefield.field import ParticleField


def measure_render_cost(count: int, frames: int = 30, seed: int = 0) -> np.ndarray:
    """
    指定粒子数で描画時間を計測

    Args:
        count: 粒子数
        frames: 計測フレーム数
        seed: 粒子配置の乱数シード

    Returns:
        各フレームの描画時間 (ms)
    """
    field = ParticleField(FieldConfig(count=count), rng=np.random.default_rng(seed))
    timings = []
    for _ in range(frames):
        field.step(config.FRAME_BUDGET_MS)
        start = time.perf_counter()
        field.render()
        timings.append((time.perf_counter() - start) * 1000.0)
    field.destroy()
    return np.array(timings)


def run_benchmark(counts=(25, 50, 100, 150, 200, 300), frames: int = 30):
    """粒子数ごとの平均描画時間を表示"""
    budget = config.FRAME_BUDGET_MS
    print(f"フレーム予算: {budget:.2f}ms ({config.FPS} FPS)")
    print(f"{'count':>6} {'mean[ms]':>10} {'p95[ms]':>10}  判定")

    results = []
    for count in counts:
        timings = measure_render_cost(count, frames)
        mean = float(np.mean(timings))
        p95 = float(np.percentile(timings, 95))
        verdict = "✅ OK" if p95 <= budget else "❌ 予算超過"
        print(f"{count:>6} {mean:>10.2f} {p95:>10.2f}  {verdict}")
        results.append((count, mean, p95))
    return results


def plot_results(results):
    """計測結果をプロット"""
    import matplotlib.pyplot as plt

    counts = np.array([r[0] for r in results])
    means = np.array([r[1] for r in results])
    p95s = np.array([r[2] for r in results])

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(counts, means, 'o-', label='mean')
    ax.plot(counts, p95s, 's--', label='p95', alpha=0.7)
    ax.axhline(y=config.FRAME_BUDGET_MS, color='r', linestyle=':', label=f'budget ({config.FPS} FPS)')
    ax.set_xlabel('Particle count')
    ax.set_ylabel('Render time [ms]')
    ax.set_title('Proximity render cost (O(n²) pair pass)')
    ax.legend()
    ax.grid(alpha=0.3)

    plt.tight_layout()
    plt.savefig('render_cost.png', dpi=150)
    print("Plot saved to render_cost.png")
    plt.show()


if __name__ == "__main__":
    pygame.init()
    results = run_benchmark()
    if "--plot" in sys.argv:
        plot_results(results)
    pygame.quit()

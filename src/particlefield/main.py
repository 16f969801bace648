"""ParticleField メインエントリーポイント"""

import logging
import os

import pygame

from particlefield import config
from particlefield.animation.driver import FrameScheduler
from particlefield.field import ParticleField
from particlefield.logging_utils import setup_logging
from particlefield.rendering.canvas import Host

logger = logging.getLogger(__name__)


def _select_preset() -> config.FieldConfig:
    """環境変数 PARTICLEFIELD_PRESET からプリセットを選択"""
    name = os.environ.get("PARTICLEFIELD_PRESET", "default")
    if name not in config.FIELD_PRESETS:
        logger.warning("unknown preset %r, falling back to 'default'", name)
        name = "default"
    return config.FIELD_PRESETS[name]


def main():
    """メインループ"""
    setup_logging()
    field_config = _select_preset()

    pygame.init()
    screen = pygame.display.set_mode((int(field_config.width), int(field_config.height)))
    pygame.display.set_caption("ParticleField")
    clock = pygame.time.Clock()

    host = Host(screen)
    scheduler = FrameScheduler()

    field = ParticleField(field_config, scheduler=scheduler)
    field.mount(host)

    running = True
    while running:
        # --- イベント処理 ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    # 破棄して作り直す
                    field.destroy()
                    field = ParticleField(field_config, host, scheduler=scheduler)
            host.dispatch(event)

        # --- 更新・描画 ---
        scheduler.run_pending()
        host.render()

        pygame.display.flip()
        clock.tick(config.FPS)

    field.destroy()
    pygame.quit()


if __name__ == "__main__":
    main()

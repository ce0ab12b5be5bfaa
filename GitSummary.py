"""
git-summary (V5.0)
- cli.py: 命令行界面和配置组装
- context.py: 运行时配置模型
- orchestrator.py: 核心业务逻辑
- GitSummary.py: 仅作为主入口启动器
"""

import logging
import sys

logger = logging.getLogger(__name__)


def main():
    # 延迟导入 cli 模块，日志在 run_cli 中配置
    import cli

    try:
        sys.exit(cli.run_cli())
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        logger.error(f"❌ 发生未处理的全局异常: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()

from __future__ import annotations

from gpacalc.core.models import Major


MAJORS: tuple[Major, ...] = (
    Major("txgc", "通信工程", "txgc.json"),
    Major("jqrgc", "机器人工程", "jqrgc.json"),
    Major("dzxx", "电子信息工程", "dzxx.json"),
    Major("dxzzs", "电子信息工程实验班", "dzxxs.json"),
    Major("cs", "计算机科学与技术、计算机科学与技术实验班", "cs.json"),
    Major("se", "软件工程", "se.json"),
    Major("bxk", "全校必修课", "bxk.json"),
)

"""电子宠物核心的全局常量：成长时间、体重变化、日志。"""
import os

# 体重（磅）
BASE_WEIGHT = 5.0
BABY_BASE_WEIGHT = 5.0   # 孵化后的基础体重
CHILD_BASE_WEIGHT = 10.0  # 幼年期基础体重
FEED_WEIGHT_GAIN = 0.5
PLAY_WEIGHT_LOSS = 0.2

# 各形态停留时间（游戏内分钟），None 表示终态
EGG_MINUTES = 5
BABY_MINUTES = 60        # 出生后 65 分钟进入幼年期
CHILD_MINUTES = 1440
TEEN_MINUTES = 2880
ADULT_MINUTES = 4320

# 时间推进（分钟）
MINUTES_PER_DAY = 1440
SLEEP_STEP_MINUTES = 60       # 睡眠中每满 60 分钟恢复一次
DECAY_INTERVAL_MINUTES = 60   # 清醒时每 60 分钟饥饿、心情各降一级
SOIL_INTERVAL_MINUTES = 180   # 每 3 小时排便一次

# 照顾评分
MAX_CARE_SCORE = 16
GOOD_CARE_RATIO = 0.75  # 青年期分支线：累计照顾 ≥ 75%

# 日志
LOGGER_NAME = "tamagotchi"
LOG_LEVEL_ENV = "TAMAGOTCHI_LOG_LEVEL"
DEFAULT_LOG_LEVEL = os.getenv(LOG_LEVEL_ENV, "WARNING")

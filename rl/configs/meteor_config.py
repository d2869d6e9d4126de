"""
Training configuration for the meteor environment
Reward shaping variants, algorithm hyperparameters and training settings
"""

# Environment parameters
ENV_CONFIG = {
    # "render_mode": None,  # Don't render during training
    "width": 800,
    "height": 600,
    "tps": 60,
    "max_steps": 3600,  # 60 seconds at 60 TPS
    "k_meteors": 5,
    "shoot_cooldown_ms": 500,
    "meteor_spawn_ms": 1000,
}

# ==============================================================================
# REWARD SHAPING CONFIGURATIONS
# ==============================================================================

# Mirrors the on-screen score: +1 per kill, -1 per crash
REWARD_CONFIG_SCORE = {
    "name": "score",
    "description": "Reward equals the change in raw score",
    "R_KILL": 1.0,
    "R_CRASH": 1.0,
    "R_SHOT": 0.0,
    "R_TIME": 0.0,
}

# Penalise wasted shots so the agent learns to aim
REWARD_CONFIG_SHARPSHOOTER = {
    "name": "sharpshooter",
    "description": "Score plus a cost per shot fired",
    "R_KILL": 1.0,
    "R_CRASH": 1.0,
    "R_SHOT": 0.05,
    "R_TIME": 0.0,
}

REWARD_CONFIG_DEFENSIVE = {
    "name": "defensive",
    "description": "Crashes cost more than kills earn",
    "R_KILL": 0.5,
    "R_CRASH": 3.0,
    "R_SHOT": 0.01,
    "R_TIME": 0.0,
}

REWARD_CONFIGS = {
    "score": REWARD_CONFIG_SCORE,
    "sharpshooter": REWARD_CONFIG_SHARPSHOOTER,
    "defensive": REWARD_CONFIG_DEFENSIVE,
}

# ==============================================================================
# ALGORITHM HYPERPARAMETERS
# ==============================================================================

PPO_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 3e-4,
    "n_steps": 2048,
    "batch_size": 256,
    "n_epochs": 10,
    "gamma": 0.995,
    "gae_lambda": 0.95,
    "clip_range": 0.2,
    "ent_coef": 0.01,
    "vf_coef": 0.5,
    "max_grad_norm": 0.5,
    "verbose": 1,
}

DQN_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 1e-4,
    "buffer_size": 100_000,
    "learning_starts": 1000,
    "batch_size": 128,
    "tau": 1.0,
    "gamma": 0.995,
    "train_freq": 4,
    "gradient_steps": 1,
    "target_update_interval": 1000,
    "exploration_fraction": 0.1,
    "exploration_initial_eps": 1.0,
    "exploration_final_eps": 0.05,
    "verbose": 1,
}

# ==============================================================================
# TRAINING SETTINGS
# ==============================================================================

TRAINING_CONFIG = {
    "total_timesteps": 500_000,
    "save_freq": 10_000,
    "eval_freq": 5_000,
    "n_eval_episodes": 5,
    "log_dir": "./logs",
    "model_dir": "./models",
    "tensorboard_log": "./tensorboard_logs",
}

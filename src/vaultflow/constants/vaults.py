"""
Default vault layout seeded for every newly registered user.
Percentages sum to 100 here, but nothing enforces that for user-defined vaults.
"""

DEFAULT_VAULTS = [
    {
        "name": "👑 Sovereign Capital Vault",
        "percentage": 50,
        "description": "Locked capital for empire building",
    },
    {
        "name": "🧪 Risk Lab Wallet",
        "percentage": 20,
        "description": "For trades, loops, experiments",
    },
    {
        "name": "🧱 Infrastructure Vault",
        "percentage": 10,
        "description": "For tools, scripts, books",
    },
    {
        "name": "🔒 Core Survival Vault",
        "percentage": 10,
        "description": "Essential needs",
    },
    {
        "name": "🎭 Chaos Play Vault",
        "percentage": 10,
        "description": "Spend freely",
    },
]

"""CLI Commands"""

import os
import sys

from gemini_commit.config import load_config, get_config_path
from gemini_commit.output import bold, dim, info, success, warning, CHECK


def display_config() -> int:
    """Display current configuration."""
    config = load_config()
    config_path = get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no .gcmrc found)")

    env_model = os.environ.get('GEMINI_MODEL')
    if env_model:
        print(f"  {dim('Environment overrides:')}")
        print(f"    GEMINI_MODEL={env_model}")

    key_status = success(CHECK + ' set') if os.environ.get('GEMINI_API_KEY') else warning('not set')

    print()
    print(f"  {bold('Settings:')}")
    print(f"    model:          {info(config.model)}")
    print(f"    api_host:       {info(config.api_host)}")
    print(f"    confirm:        {info(str(config.confirm).lower())}")
    print(f"    GEMINI_API_KEY: {key_status}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  .gcmrc (in current directory)")
    print(f"    Global: ~/.gcmrc\n")

    return 0


def run_install_completion() -> int:
    """Print the argcomplete hook for the user's shell."""
    shell = os.environ.get('SHELL', '')
    hook = 'eval "$(register-python-argcomplete gcm)"'

    print(f"\n{bold('Tab Completion Setup')}\n")

    for name in ('zsh', 'bash'):
        if name in shell:
            rc_file = os.path.expanduser(f'~/.{name}rc')
            print(f"Add this line to {dim(rc_file)}:\n")
            print(f"  {hook}\n")
            print(f"Then run: {dim(f'source ~/.{name}rc')}")
            break
    else:
        if sys.platform == 'win32':
            print("For PowerShell, add to your $PROFILE:\n")
            print("  register-python-argcomplete --shell powershell gcm | Out-String | Invoke-Expression")
        else:
            print(f"  {dim('# Bash/Zsh')}")
            print(f"  {hook}\n")
            print(f"  {dim('# Fish')}")
            print("  register-python-argcomplete --shell fish gcm | source")

    print(f"\n{dim('After setup, press TAB to autocomplete flags.')}")
    return 0

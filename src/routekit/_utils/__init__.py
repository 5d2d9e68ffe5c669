from ._user_agent import user_agent_value

__all__ = ["user_agent_value"]

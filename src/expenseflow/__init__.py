"""ExpenseFlow: smart expense management on top of a remote AI agent.

Components:
    - **config**: settings loaded from environment / ``.env``
    - **agent/**: HTTP client for the remote agent and the receipt upload adapter
    - **expenses/**: expense, policy and chat domain models plus seed data
    - **flows/**: submission, tracking and policy chat state reducers
    - **utils/**: JSON extraction and logging helpers

The Streamlit UI in ``ui/`` drives the flows; the flows themselves have no
Streamlit dependency and can be exercised directly:

    ```python
    from src.expenseflow.config import get_settings
    from src.expenseflow.agent import AgentClient
    from src.expenseflow.flows.chat import ChatState, PolicyChatFlow

    settings = get_settings()
    flow = PolicyChatFlow(ChatState(), AgentClient.from_settings(settings), settings.AGENT_ID)
    flow.ask("What is the meal expense limit?")
    ```
"""

__version__ = "0.1.0"

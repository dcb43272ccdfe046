"""
Argument Coach - Agent Core Architecture

Four role agents behind one router:
1. Student Agent - Quick argument check and learning-style detection
2. Teacher Agent - Inclusive activities adapted to a learner's style
3. Critique Agent - Full argument analysis with feedback and micro-challenges
4. Analysis Agent - Deep analysis and progress metrics
"""
import logging
import threading
import time
from abc import abstractmethod
from typing import Dict, Any, List, Optional
from dataclasses import dataclass, field
from enum import Enum

from ..errors import UnknownAgentError
from ..feedback.generator import generate_id
from ..progress.session_store import SessionStore
from ..utils.logger import create_logger

logger = logging.getLogger(__name__)


class AgentRole(Enum):
    STUDENT = "student"
    TEACHER = "teacher"
    ANALYSIS = "analysis"
    CRITIQUE = "critique"

    @classmethod
    def resolve(cls, agent_id: str) -> "AgentRole":
        """Map an agent id (or alias) to its role."""
        role = AGENT_ID_ALIASES.get((agent_id or "").strip().lower())
        if role is None:
            raise UnknownAgentError(agent_id)
        return role


AGENT_ID_ALIASES = {
    "student": AgentRole.STUDENT,
    "student-agent": AgentRole.STUDENT,
    "teacher": AgentRole.TEACHER,
    "teacher-agent": AgentRole.TEACHER,
    "analysis": AgentRole.ANALYSIS,
    "analysis-agent": AgentRole.ANALYSIS,
    "critique": AgentRole.CRITIQUE,
    "critique-agent": AgentRole.CRITIQUE,
    "a2a-agent": AgentRole.CRITIQUE,
}


class MessageStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"  # terminal
    FAILED = "failed"        # terminal


@dataclass
class AgentMessage:
    """One routed message and its outcome."""
    id: str
    from_agent: str
    to_agent: str
    session_id: str
    content: Any
    timestamp: float = field(default_factory=time.time)
    status: MessageStatus = MessageStatus.PENDING
    response: Optional[Dict[str, Any]] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "from": self.from_agent,
            "to": self.to_agent,
            "session_id": self.session_id,
            "timestamp": self.timestamp,
            "status": self.status.value,
            "error": self.error,
        }


@dataclass
class AgentContext:
    """Context handed to the role agent for one message."""
    # Input data
    message: Any = None
    session_id: str = "default"
    session_context: Dict[str, Any] = field(default_factory=dict)
    metadata: Dict[str, Any] = field(default_factory=dict)

    # Output (populated by the agent)
    response: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)

    @property
    def student_id(self) -> Optional[str]:
        if isinstance(self.message, dict) and self.message.get("student_id"):
            return self.message["student_id"]
        return self.session_context.get("student_id")


@dataclass
class ToolResult:
    """Result from a tool execution."""
    tool_name: str
    success: bool
    data: Dict[str, Any]
    error: Optional[str] = None


class BaseTool:
    """Base class for agent tools."""
    name: str = "base_tool"
    description: str = "Base tool"

    def execute(self, context: AgentContext, **kwargs) -> ToolResult:
        raise NotImplementedError


class BaseAgent:
    """Base class for all role agents."""

    def __init__(self, role: AgentRole, tools: List[BaseTool], verbose: bool = False):
        self.role = role
        self.tools = {tool.name: tool for tool in tools}
        self.verbose = verbose

    def _log_verbose(self, message: str):
        """Log verbose output if enabled."""
        if self.verbose:
            logger.info(f"[{self.role.value.upper()}] {message}")

    def _log_tool_call(self, tool_name: str, inputs: Dict = None, result: 'ToolResult' = None):
        """Log tool calls if verbose."""
        if self.verbose:
            if inputs:
                self._log_verbose(f"🔧 {tool_name}({list(inputs.keys())})")
            if result:
                status = "✓" if result.success else "✗"
                self._log_verbose(f"   {status} {tool_name} → {list(result.data.keys())[:3]}...")

    def _run_tool(self, tool_name: str, context: AgentContext, **kwargs) -> ToolResult:
        """Execute a registered tool with call logging."""
        self._log_tool_call(tool_name, kwargs)
        result = self.tools[tool_name].execute(context, **kwargs)
        self._log_tool_call(tool_name, result=result)
        if not result.success:
            context.warnings.append(f"{tool_name}: {result.error}")
        return result

    @abstractmethod
    def process(self, context: AgentContext) -> AgentContext:
        """Process the context and return it with `response` populated."""
        raise NotImplementedError


class AgentRouter:
    """
    Dispatches messages to role agents and records every message per session.

    Message lifecycle: pending -> processing -> completed | failed.
    Handler errors never escape route(); they come back as
    {"success": False, "message_id": ..., "error": ...}.
    """

    def __init__(
        self,
        agents: List[BaseAgent],
        message_log: Optional[SessionStore] = None,
        verbose: bool = False
    ):
        self.agents: Dict[AgentRole, BaseAgent] = {agent.role: agent for agent in agents}
        self.message_log = message_log if message_log is not None else SessionStore()
        self.verbose = verbose
        self.enhanced_logger = create_logger("Router", verbose=verbose)
        self._contexts: Dict[str, Dict[str, Any]] = {}
        self._context_lock = threading.Lock()

    def register(self, agent: BaseAgent):
        self.agents[agent.role] = agent
        self.enhanced_logger.info(f"Agent {agent.role.value} registered")

    def set_context(self, session_id: str, context: Dict[str, Any]) -> Dict[str, Any]:
        """Replace a session's context; version increments on every write."""
        with self._context_lock:
            previous = self._contexts.get(session_id, {})
            stored = {
                **(context or {}),
                "last_updated": time.time(),
                "version": previous.get("version", 0) + 1,
            }
            self._contexts[session_id] = stored
            return dict(stored)

    def get_context(self, session_id: str) -> Dict[str, Any]:
        with self._context_lock:
            return dict(self._contexts.get(session_id, {}))

    def messages(self, session_id: str) -> List[AgentMessage]:
        return self.message_log.history(session_id)

    def route(self, from_agent: str, to_agent: str, payload: Any,
              session_id: str = "default") -> Dict[str, Any]:
        """Send a payload to the agent named by to_agent and return the wrapped result."""
        message = AgentMessage(
            id=generate_id("msg"),
            from_agent=from_agent,
            to_agent=to_agent,
            session_id=session_id,
            content=payload,
        )
        self.message_log.append(session_id, message)

        try:
            role = AgentRole.resolve(to_agent)
            agent = self.agents.get(role)
            if agent is None:
                raise UnknownAgentError(to_agent)
        except UnknownAgentError as e:
            return self._fail(message, str(e))

        message.status = MessageStatus.PROCESSING
        context = AgentContext(
            message=payload,
            session_id=session_id,
            session_context=self.get_context(session_id),
            metadata={
                "from": from_agent,
                "session_id": session_id,
                "timestamp": message.timestamp,
                "message_id": message.id,
            },
        )

        self.enhanced_logger.phase(f"{message.id}: {from_agent} -> {role.value}")
        self.enhanced_logger.increment(f"{role.value}_messages")

        try:
            with self.enhanced_logger.timer(f"{role.value} agent ({message.id})"):
                context = agent.process(context)
        except Exception as e:
            logger.exception(f"{role.value} agent failed on {message.id}")
            return self._fail(message, str(e))

        response = dict(context.response)
        if context.warnings:
            response["warnings"] = list(context.warnings)

        message.status = MessageStatus.COMPLETED
        message.response = response
        self.enhanced_logger.route_result(message.id, to_agent, message.status.value)

        return {
            "success": True,
            "message_id": message.id,
            "response": response,
        }

    def _fail(self, message: AgentMessage, error: str) -> Dict[str, Any]:
        message.status = MessageStatus.FAILED
        message.error = error
        self.enhanced_logger.route_result(message.id, message.to_agent, message.status.value, error)
        return {
            "success": False,
            "message_id": message.id,
            "error": error,
        }

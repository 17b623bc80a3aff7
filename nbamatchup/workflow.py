"""
Forecast workflow: team selection, simulated analysis delay, result.

States:
    IDLE       -> fewer than two teams selected
    READY      -> two distinct teams selected, trigger available
    COMPUTING  -> trigger accepted, waiting out the analysis delay
    RESOLVED   -> prediction available

Every accepted trigger opens a new session. When the delayed step
finishes it only publishes its prediction if that session is still the
one being computed; a selection change or a newer trigger in between
makes the result stale and it is dropped.

Usage:
    import asyncio
    from nbamatchup.catalog import TeamCatalog
    from nbamatchup.workflow import PredictionWorkflow

    async def main():
        workflow = PredictionWorkflow(TeamCatalog.default(), delay=0.5)
        workflow.select_home("BOS")
        workflow.select_away("LAL")
        prediction = await workflow.run()

    asyncio.run(main())
"""

from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, ClassVar, Optional, Union
import asyncio
import logging

from nbamatchup.catalog import TeamCatalog
from nbamatchup.config import DEFAULT_PARAMS, Config, ModelParams
from nbamatchup.exceptions import DuplicateSelection
from nbamatchup.models.engine import Prediction, predict
from nbamatchup.models.profile import Side, TeamProfile, validate_matchup
from nbamatchup.ops.metrics import MetricsRecorder, get_metrics_recorder

logger = logging.getLogger(__name__)

DEFAULT_ANALYSIS_DELAY = 1.5

Engine = Callable[[TeamProfile, TeamProfile, ModelParams], Prediction]
Sleeper = Callable[[float], Awaitable[None]]


class WorkflowStatus(str, Enum):
    IDLE = "idle"
    READY = "ready"
    COMPUTING = "computing"
    RESOLVED = "resolved"


@dataclass(frozen=True)
class Idle:
    status: ClassVar[WorkflowStatus] = WorkflowStatus.IDLE


@dataclass(frozen=True)
class Ready:
    status: ClassVar[WorkflowStatus] = WorkflowStatus.READY


@dataclass(frozen=True)
class Computing:
    session_id: int
    home: TeamProfile
    away: TeamProfile
    status: ClassVar[WorkflowStatus] = WorkflowStatus.COMPUTING


@dataclass(frozen=True)
class Resolved:
    session_id: int
    prediction: Prediction
    status: ClassVar[WorkflowStatus] = WorkflowStatus.RESOLVED


WorkflowState = Union[Idle, Ready, Computing, Resolved]


class PredictionWorkflow:
    """Single forecast session driven by selections and a trigger."""

    def __init__(
        self,
        catalog: TeamCatalog,
        params: ModelParams = DEFAULT_PARAMS,
        delay: float = DEFAULT_ANALYSIS_DELAY,
        engine: Engine = predict,
        sleep: Sleeper = asyncio.sleep,
        metrics: Optional[MetricsRecorder] = None,
    ) -> None:
        self._catalog = catalog
        self._params = params
        self._delay = max(0.0, float(delay))
        self._engine = engine
        self._sleep = sleep
        self._metrics = metrics or get_metrics_recorder()

        self._home: Optional[TeamProfile] = None
        self._away: Optional[TeamProfile] = None
        self._state: WorkflowState = Idle()
        self._session_id = 0
        self._task: Optional[asyncio.Task] = None

    @classmethod
    def from_config(cls, config: Config, catalog: Optional[TeamCatalog] = None,
                    **kwargs) -> "PredictionWorkflow":
        if catalog is None:
            catalog = TeamCatalog.load(config.catalog_path)
        kwargs.setdefault("delay", config.analysis_delay)
        return cls(catalog, params=config.model_params(), **kwargs)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    @property
    def catalog(self) -> TeamCatalog:
        return self._catalog

    @property
    def state(self) -> WorkflowState:
        return self._state

    @property
    def status(self) -> WorkflowStatus:
        return self._state.status

    @property
    def prediction(self) -> Optional[Prediction]:
        if isinstance(self._state, Resolved):
            return self._state.prediction
        return None

    @property
    def home(self) -> Optional[TeamProfile]:
        return self._home

    @property
    def away(self) -> Optional[TeamProfile]:
        return self._away

    @property
    def session_id(self) -> int:
        return self._session_id

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select_home(self, code: Optional[str]) -> None:
        team = self._resolve(code, other=self._away)
        if team == self._home:
            return
        self._home = team
        self._selection_changed("home", team)

    def select_away(self, code: Optional[str]) -> None:
        team = self._resolve(code, other=self._home)
        if team == self._away:
            return
        self._away = team
        self._selection_changed("away", team)

    def clear(self) -> None:
        self._home = None
        self._away = None
        self._selection_changed("both", None)

    def _resolve(self, code: Optional[str], other: Optional[TeamProfile]) -> Optional[TeamProfile]:
        if code is None or not str(code).strip():
            return None
        team = self._catalog.get(code)
        if other is not None and other.code == team.code:
            raise DuplicateSelection(team.code)
        return team

    def _selection_changed(self, slot: str, team: Optional[TeamProfile]) -> None:
        previous = self._state
        self._state = Ready() if self._home and self._away else Idle()
        if isinstance(previous, Computing):
            logger.info(
                "Selection changed during session %d; pending forecast will be discarded",
                previous.session_id,
            )
        logger.debug(
            "Selected %s=%s: %s -> %s",
            slot,
            team.code if team else None,
            previous.status.value,
            self._state.status.value,
        )

    # ------------------------------------------------------------------
    # Trigger
    # ------------------------------------------------------------------

    def trigger(self) -> Optional[asyncio.Task]:
        """
        Start a forecast; must be called from inside a running event loop.

        Returns the in-flight task, the existing one when a computation is
        already running, or None when two teams are not selected.
        """
        if isinstance(self._state, Computing):
            self._metrics.increment("workflow.trigger_ignored")
            logger.debug("Trigger ignored: session %d still computing", self._state.session_id)
            return self._task
        if self._home is None or self._away is None:
            self._metrics.increment("workflow.trigger_ignored")
            logger.debug("Trigger ignored: two teams are required")
            return None

        home = self._home.with_side(Side.HOME)
        away = self._away.with_side(Side.AWAY)
        validate_matchup(home, away)

        loop = asyncio.get_running_loop()
        self._session_id += 1
        session_id = self._session_id
        self._state = Computing(session_id=session_id, home=home, away=away)
        self._metrics.increment("workflow.triggered")
        logger.info("Session %d: forecasting %s vs %s", session_id, home.code, away.code)
        self._task = loop.create_task(self._compute(session_id, home, away))
        return self._task

    async def run(self) -> Optional[Prediction]:
        """Trigger and wait for the outcome of this session."""
        task = self.trigger()
        if task is None:
            return None
        await task
        return self.prediction

    def _is_current(self, session_id: int) -> bool:
        return isinstance(self._state, Computing) and self._state.session_id == session_id

    async def _compute(self, session_id: int, home: TeamProfile,
                       away: TeamProfile) -> Optional[Prediction]:
        await self._sleep(self._delay)
        try:
            with self._metrics.timed("engine.predict_ms"):
                prediction = self._engine(home, away, self._params)
        except Exception:
            logger.exception("Session %d: prediction engine failed", session_id)
            if self._is_current(session_id):
                self._state = Ready()
            raise

        if not self._is_current(session_id):
            self._metrics.increment("workflow.stale_discarded")
            logger.warning(
                "Session %d: discarding stale forecast %s vs %s",
                session_id,
                home.code,
                away.code,
            )
            return None

        self._state = Resolved(session_id=session_id, prediction=prediction)
        self._metrics.increment("workflow.resolved")
        logger.info(
            "Session %d: %s %d - %s %d (%s, %.0f%%)",
            session_id,
            home.code,
            prediction.home_score,
            away.code,
            prediction.away_score,
            prediction.confidence_tier.value,
            prediction.win_probability * 100,
        )
        return prediction

"""
Interactive Builder
====================

Walks the operator through every field of a ManagerConfig in a fixed order
and saves the result. There is no going back: a mistake means running the
builder again.
"""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from configuranator.config.codec import generate_config
from configuranator.config.schemas import (
    ALLOWED_DATASETS,
    CONFIG_SUFFIX,
    AircraftProperties,
    CommConfig,
    Coordinates,
    ManagerConfig,
    VisionModelConfig,
    default_vision_model_config,
)
from configuranator.core.exceptions import ValidationError
from configuranator.core.structured_logger import get_logger
from configuranator.interfaces.terminal.compound import prompt_area, prompt_tuple
from configuranator.interfaces.terminal.parsers import ScalarKind
from configuranator.interfaces.terminal.prompts import Prompter

logger = get_logger("Builder")

FILE_NAME_PROMPT = f"Enter the configuration file name (e.g., test_config{CONFIG_SUFFIX}): "
DATASET_PROMPT = f"Enter name of dataset to be used (i.e: {ALLOWED_DATASETS[0]}): "


def require_suffix(suffix: str) -> Callable[[str], str]:
    def check(text: str) -> str:
        if not text.endswith(suffix):
            raise ValidationError(f"The file name must end with '{suffix}'.")
        return text
    return check


def require_one_of(allowed: tuple[str, ...]) -> Callable[[str], str]:
    def check(text: str) -> str:
        if text not in allowed:
            raise ValidationError(f"Dataset must be one of: {', '.join(allowed)}")
        return text
    return check


@dataclass(frozen=True)
class BuildResult:
    """What one builder run produced"""

    path: Path
    config: ManagerConfig


class ConfigBuilder:
    """Collects a ManagerConfig from the operator, one prompt at a time."""

    def __init__(self, prompter: Prompter | None = None) -> None:
        self.prompter = prompter or Prompter()

    def prompt_file_name(self) -> Path:
        return Path(self.prompter.ask(FILE_NAME_PROMPT, require_suffix(CONFIG_SUFFIX)))

    def prompt_folder(self, description: str, default: str) -> str:
        """Blank input keeps ``default``."""
        answer = self.prompter.prompt_str(
            f"Enter the folder path for {description} [Leave empty for default - {default}]: "
        )
        return answer or default

    def collect_coordinates(self) -> Coordinates:
        p = self.prompter
        waypoints = prompt_area(p, "WAYPOINTS")
        mapping_area = prompt_area(p, "MAPPING")
        target_area = prompt_area(p, "TARGET")
        return Coordinates(
            waypoints=waypoints,
            mapping_area=mapping_area,
            target_area=target_area,
            flying_threshold=p.prompt_real("Enter flying altitude threshold: "),
            mapping_threshold=p.prompt_real("Enter mapping altitude threshold: "),
        )

    def collect_commconfig(self) -> CommConfig:
        p = self.prompter
        return CommConfig(
            dad_gnc_port=p.prompt_int("Enter the Dad to GNC port number: "),
            gnc_dad_port=p.prompt_int("Enter the GNC to Dad port number: "),
            dad_sauron_port=p.prompt_int("Enter the Dad to Sauron port number: "),
            sauron_dad_port=p.prompt_int("Enter the Sauron to Dad port number: "),
            groundstation_ip=p.prompt_ip("Enter the ground station IP: "),
            flightcomputer_ip=p.prompt_ip("Enter the flight computer IP: "),
        )

    def collect_vision_model(self) -> VisionModelConfig:
        p = self.prompter
        defaults = default_vision_model_config()
        model_path = p.prompt_str("Enter file path to sauron model: ")
        input_size = p.prompt_int("Enter model image input size: ")
        untagged = self.prompt_folder("images before bounds check", defaults.untagged_image_folder)
        detection = self.prompt_folder("Sauron detection images", defaults.detection_image_folder)
        mapping = self.prompt_folder("Sauron mapping images", defaults.mapping_image_folder)
        fov = prompt_tuple(p, "Enter the FOV of the camera in the format f64, f64: ", ScalarKind.REAL)
        resolution = prompt_tuple(
            p, "Enter the resolution of the camera in the format i32, i32: ", ScalarKind.INTEGER
        )
        dataset_name = p.ask(DATASET_PROMPT, require_one_of(ALLOWED_DATASETS))
        return VisionModelConfig(
            model_path=model_path,
            input_size=input_size,
            dataset_name=dataset_name,
            fov=fov,
            resolution=resolution,
            untagged_image_folder=untagged,
            detection_image_folder=detection,
            mapping_image_folder=mapping,
        )

    def collect(self) -> tuple[Path, ManagerConfig]:
        """Run every prompt in order and return the file name and config."""
        p = self.prompter
        file_name = self.prompt_file_name()
        test = p.prompt_bool("Is this a test configuration? (true/false): ")
        aircraft = AircraftProperties(
            turn_radius=p.prompt_real("Enter the turn radius (meters): "),
            velocity=p.prompt_real("Enter the velocity (meters/second): "),
        )
        coordinates = self.collect_coordinates()
        commconfig = self.collect_commconfig()
        sauron_config = self.collect_vision_model()

        config = ManagerConfig(
            test=test,
            sauron_config=sauron_config,
            aircraft_properties=aircraft,
            coordinates=coordinates,
            commconfig=commconfig,
        )
        logger.debug("Configuration assembled", path=file_name)
        return file_name, config

    def run(self) -> BuildResult:
        """Collect a configuration and save it."""
        file_name, config = self.collect()
        path = generate_config(file_name, config, echo=self.prompter.echo)
        return BuildResult(path=path, config=config)

from pydantic import BaseModel, ConfigDict, Field


class OctoModel(BaseModel):
    # JSON numbers such as 1e400 would otherwise parse to inf
    model_config = ConfigDict(allow_inf_nan=False)


class TemperatureData(OctoModel):
    actual: float | None = Field(default=None, description="Current temperature")
    target: float | None = Field(
        default=None,
        description="Target temperature, may be null if no target temperature is set.",
    )
    offset: float | None = Field(
        default=None, description="Currently configured temperature offset"
    )


class TemperatureState(OctoModel):
    tool0: TemperatureData | None = None
    tool1: TemperatureData | None = None
    tool2: TemperatureData | None = None
    bed: TemperatureData | None = None


class SDState(OctoModel):
    ready: bool | None = None


class StateFlags(OctoModel):
    operational: bool | None = None
    paused: bool | None = None
    printing: bool | None = None
    pausing: bool | None = None
    cancelling: bool | None = None
    sdReady: bool | None = None
    error: bool | None = None
    ready: bool | None = None
    closedOrError: bool | None = None


class PrinterState(OctoModel):
    text: str | None = Field(
        default=None,
        examples=["Operational", "Printing"],
        description="A textual representation of the current state of the printer",
    )
    flags: StateFlags = Field(default_factory=StateFlags)


class OctoPrinterStatus(OctoModel):
    state: PrinterState | None = None
    temperature: TemperatureState | None = None
    sd: SDState | None = None


class Filament(OctoModel):
    length: float | None = Field(
        default=None, description="Length of filament used, in mm"
    )
    volume: float | None = Field(
        default=None, description="Volume of filament used, in cm³"
    )


class File(OctoModel):
    name: str | None = Field(
        examples=["a_turtle_turtle.gco"],
        description="The name of the file without path",
        default=None,
    )
    display: str | None = Field(
        default=None, description="The display name of the file"
    )
    path: str | None = Field(
        default=None,
        examples=["folder/subfolder/file.gco"],
        description="The path to the file within the location",
    )
    origin: str | None = Field(
        default=None,
        examples=["local", "sdcard"],
        description="The origin of the file",
    )


class Job(OctoModel):
    file: File | None = Field(
        default=None,
        description="The file that is the target of the current print job",
    )
    estimatedPrintTime: float | None = Field(
        default=None, description="The estimated print time for the file, in seconds"
    )
    lastPrintTime: float | None = Field(
        default=None,
        description="The print time of the last print of the file, in seconds",
    )
    filament: Filament | None = Field(
        default=None,
        description="Information regarding the estimated filament usage of the print job",
    )


class Progress(OctoModel):
    completion: float | None = Field(
        default=None, description="Percentage of completion of the current print job"
    )
    filepos: int | None = Field(
        default=None,
        description="Current position in the file being printed, in bytes from the beginning",
    )
    printTime: float | None = Field(
        default=None, description="Time already spent printing, in seconds"
    )
    printTimeLeft: float | None = Field(
        default=None, description="Estimate of time left to print, in seconds"
    )


class CurrentJob(OctoModel):
    job: Job | None = None
    progress: Progress | None = None
    state: str | None = None
    error: str | None = None
